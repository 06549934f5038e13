import pytest


def make_line(ip='10.0.0.1', date='2024-01-01', time='00:00:00', port='80',
              status='200', win32='0', bytes_sent='100', time_taken='5'):
    fields = [
        date, time, ip, '-', '-', '-', '10.0.0.2', port, 'GET', '/a', '-',
        status, win32, bytes_sent, time_taken, 'HTTP/1.1', 'host', 'agent', '-', '-',
    ]
    return ' '.join(fields)


@pytest.fixture
def sample_lines():
    return (
        ['#Fields: date time c-ip cs-username s-sitename s-computername s-ip s-port']
        + [make_line('10.0.0.1')] * 3
        + [make_line('10.0.0.5')]
    )


@pytest.fixture
def base_dir(tmp_path, sample_lines):
    log_dir = tmp_path / 'RawLogsInput'
    log_dir.mkdir()
    (log_dir / 'access.log').write_text('\n'.join(sample_lines) + '\n', encoding='utf-8')
    return tmp_path
