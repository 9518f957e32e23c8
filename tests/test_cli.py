import sys

from practice.__main__ import main


def test_cli_plays_requested_hands(monkeypatch, capsys):
    monkeypatch.setattr(sys, "argv", ["practice", "--hands", "3", "--seed", "5"])
    main()
    out = capsys.readouterr().out
    assert out.count("=== Hand") == 3
    assert out.count("Final hand:") == 3
    assert "RIVER" in out


def test_cli_forced_scenario(monkeypatch, capsys):
    monkeypatch.setattr(sys, "argv", ["practice", "--scenario", "Royal Flush", "--seed", "1"])
    main()
    out = capsys.readouterr().out
    assert "(Royal Flush)" in out
    assert "Final hand: Royal Flush" in out
    assert "The best possible hand" in out


def test_cli_lists_catalog(monkeypatch, capsys):
    monkeypatch.setattr(sys, "argv", ["practice", "--list"])
    main()
    out = capsys.readouterr().out
    assert "Evolving Hand" in out
    assert "(must show)" in out
