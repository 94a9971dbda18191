"""Tests for scroll offset mapping and the scroll sync state machine."""

from src.scroll_sync import (
    LayeredScrollAccessor,
    ScrollMetrics,
    ScrollSyncConfig,
    ScrollSyncController,
    SyncState,
    compute_scroll_sync,
)


class TestComputeScrollSync:
    """Test proportional offset mapping."""

    def test_proportional_mapping(self):
        source = ScrollMetrics(scroll_top=50, scroll_height=200, client_height=100)
        target = ScrollMetrics(scroll_top=0, scroll_height=400, client_height=100)

        assert compute_scroll_sync(source, target) == 150

    def test_source_without_overflow_is_noop(self):
        source = ScrollMetrics(scroll_top=0, scroll_height=100, client_height=100)
        target = ScrollMetrics(scroll_top=0, scroll_height=400, client_height=100)

        assert compute_scroll_sync(source, target) is None

    def test_source_smaller_than_viewport_is_noop(self):
        source = ScrollMetrics(scroll_top=0, scroll_height=50, client_height=100)
        target = ScrollMetrics(scroll_top=0, scroll_height=400, client_height=100)

        assert compute_scroll_sync(source, target) is None

    def test_target_without_overflow_is_noop(self):
        source = ScrollMetrics(scroll_top=100, scroll_height=200, client_height=100)

        assert compute_scroll_sync(source, ScrollMetrics(scroll_top=0, scroll_height=50, client_height=100)) is None
        assert compute_scroll_sync(source, ScrollMetrics(scroll_top=0, scroll_height=100, client_height=100)) is None


class TestScrollSyncController:
    """Test the latch, settle timer and no-op paths."""

    def _controller(self, editor, preview, scheduler, **config):
        return ScrollSyncController(
            editor_accessor=lambda: editor,
            preview_accessor=lambda: preview,
            scheduler=scheduler,
            config=ScrollSyncConfig(**config),
        )

    def test_editor_drives_preview(self, manual_scheduler, make_scroll_target):
        editor = make_scroll_target(scroll_top=50, scroll_height=200, client_height=100)
        preview = make_scroll_target(scroll_top=0, scroll_height=400, client_height=100)
        controller = self._controller(editor, preview, manual_scheduler)

        assert controller.on_editor_scroll() == 150
        assert preview.scroll_top == 150
        assert controller.state is SyncState.DRIVEN_BY_EDITOR

    def test_echo_from_preview_is_ignored(self, manual_scheduler, make_scroll_target):
        """The preview's scroll event caused by our own write does not bounce back."""
        editor = make_scroll_target(scroll_top=50, scroll_height=200, client_height=100)
        preview = make_scroll_target(scroll_top=0, scroll_height=400, client_height=100)
        controller = self._controller(editor, preview, manual_scheduler)

        controller.on_editor_scroll()

        assert controller.on_preview_scroll() is None
        assert editor.writes == []

    def test_settle_timer_returns_to_idle(self, manual_scheduler, make_scroll_target):
        editor = make_scroll_target(scroll_top=50, scroll_height=200, client_height=100)
        preview = make_scroll_target(scroll_top=0, scroll_height=400, client_height=100)
        controller = self._controller(editor, preview, manual_scheduler, settle_delay_ms=100)

        controller.on_editor_scroll()
        manual_scheduler.advance(0.05)
        assert controller.state is SyncState.DRIVEN_BY_EDITOR

        manual_scheduler.advance(0.05)
        assert controller.state is SyncState.IDLE

        # The preview can now drive the editor: 150 / 300 = 0.5 of the editor range
        assert controller.on_preview_scroll() == 50
        assert editor.scroll_top == 50
        assert controller.state is SyncState.DRIVEN_BY_PREVIEW

    def test_repeated_scroll_rearms_settle_timer(self, manual_scheduler, make_scroll_target):
        editor = make_scroll_target(scroll_top=50, scroll_height=200, client_height=100)
        preview = make_scroll_target(scroll_top=0, scroll_height=400, client_height=100)
        controller = self._controller(editor, preview, manual_scheduler, settle_delay_ms=100)

        controller.on_editor_scroll()
        manual_scheduler.advance(0.05)
        editor.scroll_top = 100
        assert controller.on_editor_scroll() == 300

        manual_scheduler.advance(0.06)
        assert controller.state is SyncState.DRIVEN_BY_EDITOR
        manual_scheduler.advance(0.05)
        assert controller.state is SyncState.IDLE
        assert manual_scheduler.pending == 0

    def test_source_without_overflow_leaves_target_unchanged(self, manual_scheduler, make_scroll_target):
        editor = make_scroll_target(scroll_top=0, scroll_height=100, client_height=100)
        preview = make_scroll_target(scroll_top=42, scroll_height=400, client_height=100)
        controller = self._controller(editor, preview, manual_scheduler)

        assert controller.on_editor_scroll() is None
        assert preview.scroll_top == 42
        assert preview.writes == []
        assert controller.state is SyncState.IDLE
        assert manual_scheduler.pending == 0

    def test_target_without_overflow_does_not_latch(self, manual_scheduler, make_scroll_target):
        editor = make_scroll_target(scroll_top=50, scroll_height=200, client_height=100)
        preview = make_scroll_target(scroll_top=0, scroll_height=80, client_height=100)
        controller = self._controller(editor, preview, manual_scheduler)

        assert controller.on_editor_scroll() is None
        assert preview.writes == []
        assert controller.state is SyncState.IDLE
        assert manual_scheduler.pending == 0

    def test_missing_scroll_target_is_noop(self, manual_scheduler, make_scroll_target):
        preview = make_scroll_target(scroll_top=0, scroll_height=400, client_height=100)
        controller = self._controller(None, preview, manual_scheduler)

        assert controller.on_editor_scroll() is None
        assert controller.on_preview_scroll() is None
        assert controller.state is SyncState.IDLE

    def test_layered_accessor_finding_nothing_disables_tick(self, manual_scheduler, make_scroll_target):
        preview = make_scroll_target(scroll_top=0, scroll_height=400, client_height=100)
        controller = ScrollSyncController(
            editor_accessor=LayeredScrollAccessor([lambda: None, lambda: None], name="editor"),
            preview_accessor=lambda: preview,
            scheduler=manual_scheduler,
        )

        assert controller.on_preview_scroll() is None
        assert preview.writes == []

    def test_disabled_controller_does_nothing(self, manual_scheduler, make_scroll_target):
        editor = make_scroll_target(scroll_top=50, scroll_height=200, client_height=100)
        preview = make_scroll_target(scroll_top=0, scroll_height=400, client_height=100)
        controller = self._controller(editor, preview, manual_scheduler, enabled=False)

        assert controller.on_editor_scroll() is None
        assert preview.writes == []

    def test_disabling_cancels_pending_settle(self, manual_scheduler, make_scroll_target):
        editor = make_scroll_target(scroll_top=50, scroll_height=200, client_height=100)
        preview = make_scroll_target(scroll_top=0, scroll_height=400, client_height=100)
        controller = self._controller(editor, preview, manual_scheduler)

        controller.on_editor_scroll()
        controller.enabled = False

        assert controller.state is SyncState.IDLE
        assert manual_scheduler.pending == 0

    def test_close_returns_to_idle(self, manual_scheduler, make_scroll_target):
        editor = make_scroll_target(scroll_top=50, scroll_height=200, client_height=100)
        preview = make_scroll_target(scroll_top=0, scroll_height=400, client_height=100)
        controller = self._controller(editor, preview, manual_scheduler)

        controller.on_editor_scroll()
        controller.close()

        assert controller.state is SyncState.IDLE
        assert manual_scheduler.pending == 0
        assert controller.on_preview_scroll() is not None


class TestScrollSyncConfig:
    """Test configuration defaults and environment overrides."""

    def test_defaults(self):
        config = ScrollSyncConfig()

        assert config.enabled is True
        assert config.settle_delay_ms == 100

    def test_from_env(self, monkeypatch):
        monkeypatch.setenv("SCROLL_SYNC_ENABLED", "false")
        monkeypatch.setenv("SCROLL_SETTLE_DELAY_MS", "250")

        config = ScrollSyncConfig.from_env()

        assert config.enabled is False
        assert config.settle_delay_ms == 250
