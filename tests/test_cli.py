import pytest

from mobilekit.cli import Label, Report, TextWrapper


def test_label_exit_codes():
    assert Label.VICTORY.exit_code() == 0
    assert Label.ERROR.exit_code() == 1
    assert Label.ACTION_REQUEST.exit_code() == 1


def test_label_colors_distinct():
    error = Label.ERROR.color()
    action = Label.ACTION_REQUEST.color()
    victory = Label.VICTORY.color()
    assert len({error, action, victory}) == 3


def test_label_text():
    text = Report.action_request("m", "d").format(TextWrapper(width=80), colorize=False)
    assert text == "action request: m\n    d\n"


@pytest.mark.parametrize(
    "factory, label",
    [
        (Report.error, Label.ERROR),
        (Report.action_request, Label.ACTION_REQUEST),
        (Report.victory, Label.VICTORY),
    ],
)
def test_report_constructors(factory, label):
    report = factory("msg", "details")
    assert report.label is label
    assert report.exit_code() == label.exit_code()


def test_report_converts_to_text():
    report = Report.error(ValueError("bad"), 42)
    assert report.msg == "bad"
    assert report.details == "42"


def test_report_format_plain():
    report = Report.victory("done", "all good")
    text = report.format(TextWrapper(width=80), colorize=False)
    assert text == "victory: done\n    all good\n"


def test_report_format_wraps_details_with_indent():
    details = " ".join(["word"] * 40)
    text = Report.error("failed", details).format(TextWrapper(width=30), colorize=False)
    lines = text.rstrip("\n").split("\n")
    assert lines[0] == "error: failed"
    assert len(lines) > 2
    for line in lines[1:]:
        assert line.startswith("    ")
        assert len(line) <= 30
    assert " ".join(line.strip() for line in lines[1:]) == details


def test_report_format_colorized():
    text = Report.victory("done", "ok").format(TextWrapper(width=200), colorize=True)
    assert text.startswith("\x1b[1;92mvictory:\x1b[0m \x1b[92mdone\x1b[0m\n")
    assert text.endswith("    ok\n")


def test_report_print_streams(capsys):
    wrapper = TextWrapper(width=80)
    Report.error("bad", "oops").print(wrapper)
    Report.victory("good", "yay").print(wrapper)
    captured = capsys.readouterr()
    assert "bad" in captured.err and "oops" in captured.err
    assert "good" in captured.out and "yay" in captured.out
    assert "bad" not in captured.out


def test_fill_keeps_line_breaks():
    assert TextWrapper(width=80).fill("first\nsecond") == "first\nsecond"


def test_fill_does_not_split_at_hyphens():
    lines = TextWrapper(width=10).fill("foo-bar qux-quux").split("\n")
    assert lines == ["foo-bar", "qux-quux"]


def test_fill_respects_width():
    text = " ".join(["alpha", "beta", "gamma", "delta"] * 5)
    for line in TextWrapper(width=15).fill(text).split("\n"):
        assert len(line) <= 15


def test_indented_applies_to_every_line():
    wrapper = TextWrapper(width=12).indented("  ")
    lines = wrapper.fill("one two three four five\nsix").split("\n")
    assert all(line.startswith("  ") for line in lines)
    assert wrapper.width == 12