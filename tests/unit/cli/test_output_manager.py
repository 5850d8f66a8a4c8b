# tests/unit/cli/test_output_manager.py
# Unit tests for output levels, console logging & the log file

from gitguy.cli.output_manager import OutputManager
from gitguy.core.output import (
    NullOutputManager,
    OutputInterface,
    OutputLevel,
    get_output_manager,
    reset_output_manager,
    set_output_manager,
)
from gitguy.core.verbose import init_verbose, is_verbose_enabled, vlog, vlog_stage
from tests.test_support.rich_capture import capture_rich_output, extract_plain_text


class TestRegistry:

    # * Verify both implementations satisfy the logger protocol
    def test_protocol(self):
        assert isinstance(NullOutputManager(), OutputInterface)
        assert isinstance(OutputManager(), OutputInterface)

    # * Verify set/get/reset of the registered logger
    def test_registry(self):
        manager = OutputManager()
        set_output_manager(manager)
        assert get_output_manager() is manager
        reset_output_manager()
        assert isinstance(get_output_manager(), NullOutputManager)

    # * Verify init_verbose maps flags to levels
    def test_init_verbose_levels(self):
        init_verbose(enabled=False)
        assert get_output_manager().get_level() == OutputLevel.NORMAL
        init_verbose(enabled=True)
        assert is_verbose_enabled()
        init_verbose(enabled=True, debug=True)
        assert get_output_manager().is_debug_enabled()


class TestConsoleOutput:

    # * Verify verbose messages only print at verbose level
    def test_verbose_gating(self):
        manager = OutputManager()
        with capture_rich_output() as console:
            manager.verbose("hidden", "GIT")
            manager.initialize(OutputLevel.VERBOSE)
            manager.verbose("shown", "GIT", detail="line a\nline b")
            manager.debug("no debug", "AI")
        output = extract_plain_text(console)
        assert "hidden" not in output
        assert "[GIT] shown" in output
        assert "line b" in output
        assert "no debug" not in output

    # * Verify quiet silences warnings on the console
    def test_quiet(self):
        manager = OutputManager()
        manager.initialize(OutputLevel.VERBOSE, quiet=True)
        with capture_rich_output() as console:
            manager.warning("careful")
            manager.info("hello")
        assert extract_plain_text(console).strip() == ""

    # * Verify vlog helpers reach the registered manager
    def test_vlog_helpers(self):
        init_verbose(enabled=True)
        with capture_rich_output() as console:
            vlog("GIT", "status")
            vlog_stage("Diff", "staged changes")
        output = extract_plain_text(console)
        assert "[GIT] status" in output
        assert "[STAGE] Diff: staged changes" in output


class TestLogFile:

    # * Verify verbose output & session markers land in the log file
    def test_log_file(self, tmp_path):
        log_path = tmp_path / "logs" / "gitguy.log"
        manager = OutputManager()
        manager.initialize(OutputLevel.VERBOSE, log_file=log_path)
        with capture_rich_output():
            manager.start_session()
            manager.verbose("loaded config", "CONFIG", detail="theme = amber")
            manager.warning("slow terminal")
            manager.end_session()

        content = log_path.read_text(encoding="utf-8")
        assert "Session Started:" in content
        assert "[CONFIG] loaded config" in content
        assert "  theme = amber" in content
        assert "[WARNING] slow terminal" in content
        assert "Session Ended:" in content

    # * Verify writes after end_session are dropped silently
    def test_closed_after_end(self, tmp_path):
        log_path = tmp_path / "gitguy.log"
        manager = OutputManager()
        manager.initialize(OutputLevel.VERBOSE, log_file=log_path)
        manager.end_session()
        with capture_rich_output():
            manager.verbose("late", "GIT")
        assert "late" not in log_path.read_text(encoding="utf-8")

    # * Verify an unwritable log path is ignored
    def test_unwritable_log_path(self, tmp_path):
        blocker = tmp_path / "file"
        blocker.write_text("x", encoding="utf-8")
        manager = OutputManager()
        manager.initialize(OutputLevel.VERBOSE, log_file=blocker / "nested.log")
        assert manager.log_file_path is None
