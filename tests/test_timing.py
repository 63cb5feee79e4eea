"""Tests for the timed context manager."""

import pytest

from perf_tracker import DEFAULT_NAME, InvalidOperationError, Resolution, timed


def test_timed_records_section(registry, clock):
    with timed(registry, "Load", Resolution.SECONDS) as section_id:
        clock.advance(3_200_000_000)

    section = registry.get(section_id)
    assert section.name == "Load"
    assert section.elapsed == 3


def test_timed_ends_section_when_body_raises(registry, clock):
    with pytest.raises(KeyError):
        with timed(registry, "Broken") as section_id:
            clock.advance(1_000_000)
            raise KeyError("boom")

    assert registry.get(section_id).elapsed == 1


def test_end_to_end_report(registry, clock, capsys):
    section_id = registry.begin("Load", Resolution.SECONDS)
    assert section_id == 0
    clock.advance(1_500_000_000)
    assert registry.end(0) >= 0

    registry.show()

    rows = [line for line in capsys.readouterr().out.split("\n") if line.startswith("Load")]
    assert len(rows) == 1
    assert rows[0].endswith("1 s")


def test_body_error_survives_registry_reset(registry):
    with pytest.raises(KeyError, match="boom"):
        with timed(registry, "Broken"):
            registry.reset()
            raise KeyError("boom")

    assert len(registry) == 0


def test_body_error_survives_section_already_ended(registry, clock):
    with pytest.raises(ValueError):
        with timed(registry, "Early") as section_id:
            clock.advance(2_000_000)
            registry.end(section_id)
            clock.advance(5_000_000)
            raise ValueError("late failure")

    assert registry.get(section_id).elapsed == 2


def test_clean_exit_still_reports_end_errors(registry):
    with pytest.raises(InvalidOperationError):
        with timed(registry, "Reset"):
            registry.reset()


def test_default_name(registry):
    with timed(registry) as section_id:
        pass
    assert registry.get(section_id).name == DEFAULT_NAME
