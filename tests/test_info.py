from sentinelprobe.info import parse_info


def test_parses_key_value_lines():
    payload = "role:sentinel\nsentinel_masters:2\nsentinel_tilt:0\n"
    assert parse_info(payload) == {
        "role": "sentinel",
        "sentinel_masters": "2",
        "sentinel_tilt": "0",
    }


def test_drops_lines_without_separator():
    payload = "# Sentinel\r\n\r\nsentinel_masters:1\r\ngarbage\r\n"
    assert parse_info(payload) == {"sentinel_masters": "1"}


def test_splits_on_first_separator_only():
    payload = "master0:name=mymaster,status=ok,address=10.0.0.1:6379\n"
    assert parse_info(payload) == {
        "master0": "name=mymaster,status=ok,address=10.0.0.1:6379",
    }


def test_last_duplicate_wins():
    assert parse_info("a:1\na:2\n") == {"a": "2"}


def test_empty_payload():
    assert parse_info("") == {}
