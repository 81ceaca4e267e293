"""Tests for the offline CLI commands."""

import argparse

import pytest

from api.cli import main, parse_waypoints


class TestParseWaypoints:

    def test_pairs(self):
        assert parse_waypoints("37.806,-122.4659; 37.8591,-122.4853;") == [
            (37.806, -122.4659),
            (37.8591, -122.4853),
        ]

    def test_bad_pair(self):
        with pytest.raises(argparse.ArgumentTypeError):
            parse_waypoints("37.8")


class TestCommands:

    def test_classify(self, capsys):
        main(["classify", "--speed", "18"])
        out = capsys.readouterr().out
        assert "Force 5: Fresh Breeze" in out
        assert "Gauge (linear): 28.1%" in out

    def test_route(self, capsys):
        main(["route", "--waypoints", "37.8060,-122.4659;37.8591,-122.4853", "--vessel", "30ft"])
        out = capsys.readouterr().out
        assert "Waypoints: 2" in out
        assert "Distance: 3.32 nm" in out

    def test_route_unknown_vessel(self, capsys):
        with pytest.raises(SystemExit):
            main(["route", "--waypoints", "37.8060,-122.4659;37.8591,-122.4853", "--vessel", "99ft"])
        assert "Unknown vessel class" in capsys.readouterr().out

    def test_no_command(self):
        with pytest.raises(SystemExit):
            main([])
