"""Tests for pexlog.log — thresholds, records, children, preamble."""

import pytest

from pexlog.levels import Level, Threshold
from pexlog.log import Log, LogRecord


class RecordingLog(Log):
    """Log that keeps sent records in a list."""

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.records = []

    def send(self, record):
        self.records.append(record)


@pytest.fixture
def log():
    return RecordingLog(threshold=Level.WARN, name='pipeline')


# =============================================================================
# Thresholds
# =============================================================================

class TestThreshold:

    def test_default_threshold_is_info(self):
        assert Log().get_threshold() == Level.INFO

    def test_explicit_threshold(self, log):
        assert log.get_threshold() == Level.WARN

    def test_sends(self, log):
        assert log.sends(Level.ERROR) is True
        assert log.sends(Level.WARN) is True
        assert log.sends(Level.INFO) is False

    def test_pass_all_sends_everything(self):
        log = Log(threshold=Threshold.PASS_ALL)
        assert log.sends(Level.DEBUG - 100)

    def test_set_threshold(self, log):
        log.set_threshold(Level.DEBUG)
        assert log.sends(Level.DEBUG)

    def test_inherit_reverts_to_root(self, log):
        log.set_threshold(Threshold.INHERIT)
        assert log.get_threshold() == Level.INFO

    def test_threshold_for_relative_name(self, log):
        log.set_threshold_for('io', Level.DEBUG)
        assert log.memory.get_threshold_for('pipeline.io') == Level.DEBUG
        assert log.get_threshold_for('io') == Level.DEBUG
        assert log.get_threshold_for('io.read') == Level.DEBUG
        assert log.get_threshold_for('') == Level.WARN


# =============================================================================
# Emitting
# =============================================================================

class TestLogRecords:

    def test_filtered_message_not_sent(self, log):
        assert log.info("quiet") is False
        assert log.records == []

    def test_record_contents(self, log):
        assert log.warn("disk nearly full", free_mb=12) is True
        (rec,) = log.records
        assert isinstance(rec, LogRecord)
        assert rec.name == 'pipeline'
        assert rec.importance == Level.WARN
        assert rec.message == "disk nearly full"
        assert rec.properties == {'free_mb': 12}
        assert rec.level_name == "WARN"
        assert rec.timestamp > 0

    def test_convenience_methods(self):
        log = RecordingLog(threshold=Threshold.PASS_ALL)
        log.debug("d")
        log.info("i")
        log.warn("w")
        log.error("e")
        log.fatal("f")
        assert [r.importance for r in log.records] == [
            Level.DEBUG, Level.INFO, Level.WARN, Level.ERROR, Level.FATAL,
        ]

    def test_arbitrary_importance(self, log):
        log.log(Level.WARN + 2, "between")
        assert log.records[0].level_name == "WARN"
        assert log.records[0].importance == 12

    def test_base_log_is_silent(self, capsys):
        assert Log().fatal("nobody hears this") is True
        captured = capsys.readouterr()
        assert captured.out == ""
        assert captured.err == ""


class TestPreamble:

    def test_preamble_attached(self, log):
        log.add_preamble_property('run', 42)
        log.error("boom")
        assert log.records[0].properties == {'run': 42}

    def test_call_properties_override_preamble(self, log):
        log.add_preamble_property('run', 42)
        log.error("boom", run=7, extra='x')
        assert log.records[0].properties == {'run': 7, 'extra': 'x'}

    def test_preamble_is_copy(self, log):
        log.preamble['x'] = 1
        assert 'x' not in log.preamble


# =============================================================================
# Children
# =============================================================================

class TestChildLogs:

    def test_child_name(self, log):
        assert log.create_child_log('io').name == 'pipeline.io'

    def test_child_of_root(self):
        assert Log().create_child_log('io').name == 'io'

    def test_child_inherits_threshold(self, log):
        child = log.create_child_log('io')
        assert child.get_threshold() == Level.WARN
        log.set_threshold(Level.FATAL)
        assert child.get_threshold() == Level.FATAL

    def test_child_own_threshold(self, log):
        child = log.create_child_log('io', Level.DEBUG)
        assert child.sends(Level.DEBUG)
        assert not log.sends(Level.DEBUG)

    def test_inherit_child_keeps_configured_threshold(self, log):
        log.set_threshold_for('io', Level.DEBUG)
        child = log.create_child_log('io')
        assert child.get_threshold() == Level.DEBUG

    def test_child_shares_memory(self, log):
        child = log.create_child_log('io')
        assert child.memory is log.memory

    def test_child_copies_preamble(self, log):
        log.add_preamble_property('run', 1)
        child = log.create_child_log('io')
        assert child.preamble == {'run': 1}
        child.add_preamble_property('stage', 'read')
        assert 'stage' not in log.preamble

    def test_base_child_is_base_log(self, log):
        assert type(log.create_child_log('io')) is Log
        assert log.create_child_log('io').is_screen_capable is False


class TestRootInherit:

    def test_new_root_rejects_inherit(self):
        with pytest.raises(ValueError):
            Log(threshold=Threshold.INHERIT)

    def test_named_log_may_inherit(self):
        assert Log(threshold=Threshold.INHERIT, name='pipeline').get_threshold() == Level.INFO

    def test_root_in_existing_family_may_inherit(self, log):
        root = Log(threshold=Threshold.INHERIT, memory=log.memory)
        assert root.get_threshold() == Level.INFO
