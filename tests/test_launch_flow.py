# tests/test_launch_flow.py
from pathlib import Path

from file_launcher.launch_flow import FlowState, LaunchFlow
from file_launcher.outcomes import Opened, OpenFailed, SaveApproved, SaveCancelled, SaveDialogError


class FakeOpener:
    def __init__(self, supported=True, fail=False):
        self.supported = supported
        self.fail = fail
        self.opened = []

    def is_supported(self):
        return self.supported

    def open(self, path):
        self.opened.append(path)
        if self.fail:
            return OpenFailed(Path(path), "boom")
        return Opened(Path(path))


class Recorder:
    """ダイアログ呼び出しと表示更新を記録する。"""

    def __init__(self, answer=True, choice=None):
        self.answer = answer
        self.choice = choice if choice is not None else SaveCancelled()
        self.events = []
        self.published = []

    def confirm(self):
        self.events.append("confirm")
        return self.answer

    def choose_destination(self, name):
        self.events.append(("save_dialog", name, list(self.published)))
        return self.choice

    def publish(self, text):
        self.published.append(text)


def make_flow(source_file, catalog, opener, rec, **kw):
    return LaunchFlow(
        file=source_file,
        catalog=catalog,
        opener=opener,
        confirm=rec.confirm,
        choose_destination=rec.choose_destination,
        publish=rec.publish,
        **kw,
    )


def test_initial_state(source_file, catalog):
    flow = make_flow(source_file, catalog, FakeOpener(), Recorder())
    assert flow.state is FlowState.INIT
    assert flow.status == ""


def test_confirm_and_open(source_file, catalog):
    opener = FakeOpener()
    rec = Recorder(answer=True)
    flow = make_flow(source_file, catalog, opener, rec)

    assert flow.run() is FlowState.OPENED
    assert opener.opened == [source_file.path]
    assert rec.events == ["confirm"]
    assert flow.status == catalog.get("msg.opened_file", source_file.absolute_path)
    assert rec.published[-1] == flow.status


def test_decline_cancels(source_file, catalog):
    opener = FakeOpener()
    rec = Recorder(answer=False)
    flow = make_flow(source_file, catalog, opener, rec)

    assert flow.run() is FlowState.OPEN_CANCELLED
    assert opener.opened == []
    assert flow.status == catalog.get("msg.cancel_open_file")


def test_unsupported_goes_straight_to_save_dialog(source_file, catalog):
    rec = Recorder(choice=SaveCancelled())
    flow = make_flow(source_file, catalog, FakeOpener(supported=False), rec)

    assert flow.run() is FlowState.SAVE_CANCELLED
    assert "confirm" not in rec.events
    assert rec.events[0][:2] == ("save_dialog", "report.pdf")
    assert flow.status == catalog.get("msg.cancel_save_dialog")


def test_open_failure_publishes_will_save_before_dialog(source_file, catalog):
    rec = Recorder(answer=True, choice=SaveCancelled())
    flow = make_flow(source_file, catalog, FakeOpener(fail=True), rec)

    assert flow.run() is FlowState.SAVE_CANCELLED
    will_save = catalog.get("msg.save_file", source_file.absolute_path)
    _, _, published_before_dialog = rec.events[1]
    assert published_before_dialog == [will_save]
    assert rec.published == [will_save, catalog.get("msg.cancel_save_dialog")]


def test_save_approved_copies_file(source_file, catalog, tmp_path):
    dst = tmp_path / "out" / "copy.pdf"
    dst.parent.mkdir()
    rec = Recorder(choice=SaveApproved(dst))
    flow = make_flow(source_file, catalog, FakeOpener(supported=False), rec)

    assert flow.run() is FlowState.SAVED
    assert dst.read_bytes() == source_file.path.read_bytes()
    assert flow.status == catalog.get("msg.saved_file", dst.absolute())


def test_copy_failure_shows_raw_error_text(source_file, catalog, tmp_path):
    dst = tmp_path / "missing_dir" / "copy.pdf"
    rec = Recorder(choice=SaveApproved(dst))
    flow = make_flow(source_file, catalog, FakeOpener(supported=False), rec)

    assert flow.run() is FlowState.SAVE_ERROR
    try:
        open(dst, "wb")
    except OSError as e:
        expected = str(e)
    assert flow.status == expected
    assert flow.status != catalog.get("msg.error_save_file")


def test_copier_error_text_is_verbatim(source_file, catalog, tmp_path):
    def broken_copier(src, dst):
        raise OSError("disk full")

    rec = Recorder(choice=SaveApproved(tmp_path / "x.pdf"))
    flow = make_flow(source_file, catalog, FakeOpener(supported=False), rec, copier=broken_copier)

    assert flow.run() is FlowState.SAVE_ERROR
    assert flow.status == "disk full"


def test_dialog_error(source_file, catalog):
    rec = Recorder(choice=SaveDialogError("no display"))
    flow = make_flow(source_file, catalog, FakeOpener(supported=False), rec)

    assert flow.run() is FlowState.SAVE_ERROR
    assert flow.status == catalog.get("msg.error_save_file")
