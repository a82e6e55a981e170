import sys
from unittest import mock

import pytest

from openscribe import feedback


def test_system_feedback_plays_named_sounds():
    played = []
    fb = feedback.SystemSoundFeedback(player=played.append)
    fb.play_start_sound()
    fb.play_stop_sound()
    fb.play_complete_sound()
    assert played == ["Tink", "Pop", "Glass"]


def test_disable_silences_and_enable_restores():
    played = []
    fb = feedback.SystemSoundFeedback(player=played.append)
    fb.disable()
    fb.play_start_sound()
    fb.play_complete_sound()
    assert played == []
    fb.enable()
    fb.play_stop_sound()
    assert played == ["Pop"]


def test_context_manager_returns_feedback():
    played = []
    with feedback.SystemSoundFeedback(player=played.append) as fb:
        fb.play_start_sound()
    assert played == ["Tink"]


def test_noop_feedback_is_enabled_by_default():
    fb = feedback.NoopFeedback()
    fb.play_start_sound()
    fb.play_stop_sound()
    fb.play_complete_sound()
    fb.close()
    assert fb.enabled is True


def test_new_feedback_unsupported_platform(monkeypatch):
    monkeypatch.setattr(sys, "platform", "linux")
    with pytest.raises(feedback.FeedbackUnsupportedError, match="not supported"):
        feedback.new_feedback()


def test_new_feedback_on_macos(monkeypatch):
    monkeypatch.setattr(sys, "platform", "darwin")
    fb = feedback.new_feedback()
    assert isinstance(fb, feedback.SystemSoundFeedback)
    assert fb.enabled is True


def test_list_system_sounds_on_macos(monkeypatch):
    monkeypatch.setattr(sys, "platform", "darwin")
    sounds = feedback.list_system_sounds()
    assert len(sounds) == 14
    assert sounds[0] == "Basso"
    assert sounds[-1] == "Tink"
    assert {"Tink", "Pop", "Glass"} <= set(sounds)


def test_list_system_sounds_elsewhere_is_empty(monkeypatch):
    monkeypatch.setattr(sys, "platform", "linux")
    assert feedback.list_system_sounds() == []


def test_play_sound_by_name_unsupported(monkeypatch):
    monkeypatch.setattr(sys, "platform", "linux")
    with pytest.raises(feedback.FeedbackUnsupportedError):
        feedback.play_sound_by_name("Tink")


def test_all_sounds_announces_each_sound(monkeypatch, capsys):
    monkeypatch.setattr(sys, "platform", "darwin")
    with mock.patch("subprocess.Popen"):
        feedback.test_all_sounds()
    lines = capsys.readouterr().out.splitlines()
    assert lines == [f"Playing sound: {name}" for name in feedback.list_system_sounds()]


def test_all_sounds_elsewhere_prints_nothing(monkeypatch, capsys):
    monkeypatch.setattr(sys, "platform", "linux")
    feedback.test_all_sounds()
    assert capsys.readouterr().out == ""