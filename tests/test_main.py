import pytest

import main

from conftest import make_line


def test_main_default_paths(base_dir, capsys):
    main.main(['--base-dir', str(base_dir), '-q'])

    report = base_dir / 'IngestedLogResults' / 'report.csv'
    assert report.read_text(encoding='utf-8') == 'Count,Ip-Address\n3,10.0.0.1\n1,10.0.0.5\n'


def test_main_explicit_paths(base_dir, tmp_path):
    output = tmp_path / 'out' / 'ips.csv'
    main.main(['-i', str(base_dir / 'RawLogsInput' / 'access.log'), '-o', str(output), '-q'])
    assert output.exists()


def test_main_missing_input(tmp_path):
    with pytest.raises(SystemExit) as excinfo:
        main.main(['--base-dir', str(tmp_path), '-q'])
    assert excinfo.value.code == 1


def test_main_bad_field(tmp_path):
    log_dir = tmp_path / 'RawLogsInput'
    log_dir.mkdir()
    (log_dir / 'access.log').write_text(make_line(status='abc') + '\n', encoding='utf-8')

    with pytest.raises(SystemExit) as excinfo:
        main.main(['--base-dir', str(tmp_path), '-q'])
    assert excinfo.value.code == 1
    assert not (tmp_path / 'IngestedLogResults').exists()


def test_version(capsys):
    with pytest.raises(SystemExit):
        main.main(['--version'])
    assert 'LogIngest v' in capsys.readouterr().out


def test_main_invalid_utf8(tmp_path):
    log_dir = tmp_path / 'RawLogsInput'
    log_dir.mkdir()
    (log_dir / 'access.log').write_bytes(make_line().replace('/a', '/\xff').encode('latin-1') + b'\n')

    main.main(['--base-dir', str(tmp_path), '-q'])

    report = tmp_path / 'IngestedLogResults' / 'report.csv'
    assert report.read_text(encoding='utf-8') == 'Count,Ip-Address\n1,10.0.0.1\n'
