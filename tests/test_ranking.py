import pytest

from log_ingest import FormatError, octet_rank, rank_ip


def test_pads_octets():
    assert octet_rank(['10', '0', '0', '1']) == 10000000001
    assert octet_rank(['9', '255', '255', '255']) == 9255255255
    assert octet_rank(['123', '23', '5', '0']) == 123023005000


def test_ten_ranks_above_nine():
    assert rank_ip('10.0.0.1') > rank_ip('9.255.255.255')


@pytest.mark.parametrize('lower, higher', [
    ('0.0.0.0', '0.0.0.1'),
    ('10.0.0.9', '10.0.0.10'),
    ('192.168.1.255', '192.168.2.0'),
    ('1.2.3.4', '255.255.255.255'),
])
def test_monotonic(lower, higher):
    assert rank_ip(lower) < rank_ip(higher)


def test_long_octet_passes_through():
    assert rank_ip('1.2.3.1000') == 1002003 * 10000 + 1000


@pytest.mark.parametrize('ip', ['-', 'abc.0.0.1', '', '10.0.0.x'])
def test_non_numeric_fails(ip):
    with pytest.raises(FormatError):
        rank_ip(ip)
