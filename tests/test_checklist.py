from gauge.analyzers.checklist import build_checklist
from gauge.analyzers.strength import analyze
from gauge.core.models import CheckStatus


def _status(items):
    return {item.key: item.status for item in items}


def test_checklist_order_and_empty_password():
    items = build_checklist(analyze(""))
    assert [item.key for item in items] == [
        "length",
        "lowercase",
        "uppercase",
        "digits",
        "symbols",
        "repeats",
        "sequences",
        "common",
    ]
    status = _status(items)
    assert status["length"] is CheckStatus.WARN
    assert status["lowercase"] is CheckStatus.WARN
    assert status["symbols"] is CheckStatus.WARN
    assert status["repeats"] is CheckStatus.OK
    assert status["sequences"] is CheckStatus.OK
    assert status["common"] is CheckStatus.OK
    assert items[0].text == "Length: 0 characters (recommended 12+)"


def test_hazards_are_bad():
    items = build_checklist(analyze("password1"))
    status = _status(items)
    assert status["common"] is CheckStatus.BAD
    assert status["repeats"] is CheckStatus.BAD
    assert status["sequences"] is CheckStatus.OK
    assert status["length"] is CheckStatus.WARN
    assert status["lowercase"] is CheckStatus.OK
    assert not items[-1].ok


def test_sequences_are_bad():
    status = _status(build_checklist(analyze("abcdefghijkl")))
    assert status["sequences"] is CheckStatus.BAD
    assert status["length"] is CheckStatus.OK


def test_strong_password_passes_everything():
    items = build_checklist(analyze("xK9#mP2$vL7@nQ4!"))
    assert all(item.ok for item in items)
    assert {item.status for item in items} == {CheckStatus.OK}
