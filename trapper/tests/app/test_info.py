import pytest

from trapper.app.info import SenderInfo, parse_info


def test_parse_full_info():
    assert parse_info("processed: 2; failed: 1; total: 3; seconds spent: 0.000055") == SenderInfo(
        processed=2, failed=1, total=3, seconds_spent=0.000055
    )


def test_parse_without_seconds():
    assert parse_info("processed: 2; failed: 0; total: 2") == SenderInfo(2, 0, 2)


@pytest.mark.parametrize("info", [None, "", "No additional info.", "processed: x"])
def test_unrecognised_info(info):
    assert parse_info(info) is None
