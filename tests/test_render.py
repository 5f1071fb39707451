"""Tests for the customtkinter renderer, driven through a mocked widget toolkit."""

from unittest.mock import MagicMock, call

import pytest

pytest.importorskip("customtkinter")

from psit.popup import DialogSession, DialogSpec, build_document  # noqa: E402
from psit.popup import render  # noqa: E402


@pytest.fixture
def fake_ctk(monkeypatch) -> MagicMock:
    """customtkinter stand-in whose windows hand out numbered after() ids."""
    fake = MagicMock()
    for window in (fake.CTk.return_value, fake.CTkToplevel.return_value):
        window.after.side_effect = lambda ms, callback, window=window: f"after#{window.after.call_count}"
        window.winfo_reqwidth.return_value = 300
        window.winfo_reqheight.return_value = 200
        window.winfo_screenwidth.return_value = 1920
        window.winfo_screenheight.return_value = 1080
    monkeypatch.setattr(render, "ctk", fake)
    return fake


@pytest.fixture
def fake_winsound(monkeypatch) -> MagicMock:
    fake = MagicMock()
    monkeypatch.setattr(render, "winsound", fake)
    monkeypatch.setattr(render, "_winsound_available", True)
    return fake


def show(content="Hello", master=None, **style):
    spec = DialogSpec(content, title="Info", **style)
    session = DialogSession(spec)
    render.show_dialog(build_document(spec), session, master=master)
    return session


def run_loaded(window) -> None:
    window.after_idle.call_args.args[0]()


def test_mapping_content_becomes_bordered_label_grid(fake_ctk, fake_winsound) -> None:
    show({"CPU": "8 cores", "RAM": 16})

    texts = [c.kwargs["text"] for c in fake_ctk.CTkLabel.call_args_list]
    assert texts == ["Info", "CPU", "8 cores", "RAM", "16"]
    grid_calls = fake_ctk.CTkFrame.return_value.grid.call_args_list
    assert grid_calls == [
        call(row=0, column=0, sticky="nsew"),
        call(row=0, column=1, sticky="nsew"),
        call(row=1, column=0, sticky="nsew"),
        call(row=1, column=1, sticky="nsew"),
    ]
    assert call(family="Segoe UI", size=12, weight="bold") in fake_ctk.CTkFont.call_args_list
    assert any(c.kwargs.get("corner_radius") == 15 for c in fake_ctk.CTkFrame.call_args_list)


def test_window_is_borderless_fixed_and_topmost(fake_ctk, fake_winsound) -> None:
    show()
    window = fake_ctk.CTk.return_value
    window.overrideredirect.assert_called_once_with(True)
    window.resizable.assert_called_once_with(False, False)
    window.attributes.assert_any_call("-topmost", True)
    window.geometry.assert_called_with("+810+440")
    window.mainloop.assert_called_once_with()


def test_button_click_records_label_and_destroys_window(fake_ctk, fake_winsound) -> None:
    session = show(button_type="Yes-No")
    buttons = {c.kwargs["text"]: c.kwargs["command"] for c in fake_ctk.CTkButton.call_args_list}
    assert list(buttons) == ["Yes", "No"]

    buttons["No"]()

    assert session.result == "No"
    fake_ctk.CTk.return_value.destroy.assert_called_once_with()


def test_timer_rearms_every_second_until_timeout(fake_ctk, fake_winsound) -> None:
    on_closed = MagicMock()
    session = show(timeout=3, on_closed=on_closed)
    window = fake_ctk.CTk.return_value

    for _ in range(3):
        window.after.call_args.args[1]()

    assert window.after.call_args_list == [call(1000, window.after.call_args.args[1])] * 3
    assert session.timed_out is True
    assert session.result is None
    window.destroy.assert_called_once_with()
    window.after_cancel.assert_not_called()
    on_closed.assert_called_once_with(None)


def test_without_timeout_no_timer_is_started(fake_ctk, fake_winsound) -> None:
    show()
    fake_ctk.CTk.return_value.after.assert_not_called()


def test_closing_early_cancels_pending_tick(fake_ctk, fake_winsound) -> None:
    session = show(timeout=30)
    window = fake_ctk.CTk.return_value
    window.after.call_args.args[1]()

    fake_ctk.CTkButton.call_args.kwargs["command"]()

    assert session.result == "OK"
    window.after_cancel.assert_called_once_with("after#2")
    window.destroy.assert_called_once_with()


def test_loaded_plays_beep_with_signed_code(fake_ctk, fake_winsound) -> None:
    on_loaded = MagicMock()
    show(sound="Beep", on_loaded=on_loaded)
    window = fake_ctk.CTk.return_value

    run_loaded(window)

    fake_winsound.MessageBeep.assert_called_once_with(-1)
    on_loaded.assert_called_once_with(window)


def test_sound_failure_does_not_skip_loaded_callback(fake_ctk, fake_winsound) -> None:
    fake_winsound.MessageBeep.side_effect = OverflowError("Python int too large to convert to C long")
    on_loaded = MagicMock()
    show(sound="Exclamation", on_loaded=on_loaded)

    run_loaded(fake_ctk.CTk.return_value)

    fake_winsound.MessageBeep.assert_called_once_with(0x30)
    on_loaded.assert_called_once_with(fake_ctk.CTk.return_value)


def test_master_gets_grabbed_toplevel(fake_ctk, fake_winsound) -> None:
    master = MagicMock()
    session = show(master=master)
    window = fake_ctk.CTkToplevel.return_value

    fake_ctk.CTkToplevel.assert_called_once_with(master)
    fake_ctk.CTk.assert_not_called()
    window.grab_set.assert_called_once_with()
    master.wait_window.assert_called_once_with(window)
    window.mainloop.assert_not_called()

    session.close()
    window.grab_release.assert_called_once_with()
    window.destroy.assert_called_once_with()
