"""Tests for the Engine and Preview options (close → apply → reopen)."""

import gc

import pytest

from preview_options.config import OverlapPolicy
from preview_options.controls import Engine as EngineControl
from preview_options.controls import Preview as PreviewControl
from preview_options.errors import GuardedMutationPending
from preview_options.options.guarded import Engine, Preview, pending_mutation
from preview_options.stub import CloseDispatch, StubCameraView, StubContainer, StubView
from preview_options.target import LayoutParams


@pytest.fixture
def deferred_camera(container):
    view = StubCameraView(dispatch=CloseDispatch.DEFERRED, opened=True)
    container.add_view(view, 1, LayoutParams(width=640, height=480))
    return view


class TestEngineWhileClosed:

    def test_applies_immediately_without_restart(self, camera):
        mutation = Engine().set(camera, EngineControl.CAMERA2)
        assert mutation.applied
        assert Engine().get(camera) is EngineControl.CAMERA2
        assert camera.events == ["engine:CAMERA2"]
        assert not camera.is_opened()
        assert pending_mutation(camera) is None

    def test_set_current_value_is_idempotent(self, camera):
        option = Engine()
        option.set(camera, option.get(camera))
        assert option.get(camera) is EngineControl.CAMERA1


class TestEngineWhileOpened:

    def test_close_apply_reopen_sequence(self, opened_camera):
        mutation = Engine().set(opened_camera, EngineControl.CAMERA2)
        assert mutation.applied
        assert opened_camera.events == ["close", "engine:CAMERA2", "open"]
        assert opened_camera.is_opened()
        assert Engine().get(opened_camera) is EngineControl.CAMERA2
        assert opened_camera.listener_count == 0

    def test_pending_until_close_notification(self, deferred_camera):
        mutation = Engine().set(deferred_camera, EngineControl.CAMERA2)
        assert mutation.pending
        assert pending_mutation(deferred_camera) is mutation
        assert Engine().get(deferred_camera) is EngineControl.CAMERA1
        assert not deferred_camera.is_opened()

        assert deferred_camera.dispatch_pending() == 1

        assert mutation.applied
        assert pending_mutation(deferred_camera) is None
        assert Engine().get(deferred_camera) is EngineControl.CAMERA2
        assert deferred_camera.is_opened()
        assert deferred_camera.listener_count == 0

    def test_repeated_notifications_apply_once(self, deferred_camera):
        Engine().set(deferred_camera, EngineControl.CAMERA2)
        observer = deferred_camera._listeners[0]
        observer.on_camera_closed()
        observer.on_camera_closed()
        deferred_camera.notify_closed()
        assert deferred_camera.events == ["close", "engine:CAMERA2", "open"]

    def test_done_callbacks(self, deferred_camera):
        seen = []
        mutation = Engine().set(deferred_camera, EngineControl.CAMERA2)
        mutation.add_done_callback(seen.append)
        assert seen == []
        deferred_camera.dispatch_pending()
        assert seen == [mutation]
        late = []
        mutation.add_done_callback(late.append)
        assert late == [mutation]

    def test_done_callback_sees_reopened_camera(self, deferred_camera):
        seen = []
        mutation = Engine().set(deferred_camera, EngineControl.CAMERA2)
        mutation.add_done_callback(lambda m: seen.append(deferred_camera.is_opened()))
        deferred_camera.dispatch_pending()
        assert seen == [True]

    def test_failing_reopen_settles_with_error(self):
        class NoReopenCamera(StubCameraView):
            def open(self):
                raise RuntimeError("device lost")

        view = NoReopenCamera(opened=True, dispatch=CloseDispatch.DEFERRED)
        mutation = Engine().set(view, EngineControl.CAMERA2)
        with pytest.raises(RuntimeError):
            view.dispatch_pending()
        assert not mutation.applied
        assert not mutation.pending
        assert isinstance(mutation.error, RuntimeError)

    def test_failing_close_leaves_nothing_pending(self):
        class BrokenCamera(StubCameraView):
            def close(self):
                raise RuntimeError("device busy")

        view = BrokenCamera(opened=True)
        with pytest.raises(RuntimeError):
            Engine().set(view, EngineControl.CAMERA2)
        assert view.listener_count == 0
        assert pending_mutation(view) is None

    def test_pending_entry_dropped_with_camera(self):
        view = StubCameraView(dispatch=CloseDispatch.DEFERRED, opened=True)
        Engine().set(view, EngineControl.CAMERA2)
        replacement = StubCameraView(dispatch=CloseDispatch.DEFERRED, opened=True)
        del view
        gc.collect()
        assert pending_mutation(replacement) is None


class TestOverlappingGuardedChanges:

    def test_reject_policy_raises_and_keeps_first_change(self, deferred_camera):
        first = Engine().set(deferred_camera, EngineControl.CAMERA2)
        with pytest.raises(GuardedMutationPending):
            Engine().set(deferred_camera, EngineControl.CAMERA1)
        with pytest.raises(GuardedMutationPending):
            Preview().set(deferred_camera, PreviewControl.TEXTURE)

        deferred_camera.dispatch_pending()

        assert first.applied
        assert Engine().get(deferred_camera) is EngineControl.CAMERA2
        assert Preview().get(deferred_camera) is PreviewControl.GL_SURFACE

    def test_coalesce_policy_keeps_last_value(self, deferred_camera):
        option = Preview(overlap_policy=OverlapPolicy.COALESCE)
        first = option.set(deferred_camera, PreviewControl.TEXTURE)
        second = option.set(deferred_camera, PreviewControl.SURFACE)
        assert second is first
        assert first.value is PreviewControl.SURFACE

        deferred_camera.dispatch_pending()

        assert option.get(deferred_camera) is PreviewControl.SURFACE
        assert deferred_camera.events.count("close") == 1
        assert deferred_camera.events.count("open") == 1
        assert "preview:TEXTURE" not in deferred_camera.events

    def test_coalesce_across_options_applies_in_request_order(self, deferred_camera):
        engine = Engine(overlap_policy=OverlapPolicy.COALESCE)
        preview = Preview(overlap_policy=OverlapPolicy.COALESCE)
        mutation = engine.set(deferred_camera, EngineControl.CAMERA2)
        preview.set(deferred_camera, PreviewControl.TEXTURE)
        assert mutation.changes == (
            ("Engine", EngineControl.CAMERA2),
            ("Preview Surface", PreviewControl.TEXTURE),
        )

        deferred_camera.dispatch_pending()

        assert deferred_camera.events == ["close", "engine:CAMERA2", "preview:TEXTURE", "open"]
        assert deferred_camera.is_opened()

    def test_new_change_allowed_after_completion(self, deferred_camera):
        Engine().set(deferred_camera, EngineControl.CAMERA2)
        deferred_camera.dispatch_pending()
        mutation = Engine().set(deferred_camera, EngineControl.CAMERA1)
        deferred_camera.dispatch_pending()
        assert mutation.applied
        assert Engine().get(deferred_camera) is EngineControl.CAMERA1


class TestPreviewOption:

    def _four_siblings(self, view, params):
        parent = StubContainer(width=800, height=600)
        parent.add_view(StubView("a"))
        parent.add_view(StubView("b"))
        parent.add_view(view, 2, params)
        parent.add_view(StubView("d"))
        return parent

    def test_idle_change_keeps_index_and_params(self):
        view = StubCameraView()
        params = LayoutParams(width=300, height=200)
        parent = self._four_siblings(view, params)

        mutation = Preview().set(view, PreviewControl.TEXTURE)

        assert mutation.applied
        assert parent.child_count == 4
        assert parent.index_of_child(view) == 2
        assert view.layout_params is params
        assert view.layout_params == LayoutParams(width=300, height=200)
        assert [child.name for child in parent.children] == ["a", "b", "camera", "d"]
        assert Preview().get(view) is PreviewControl.TEXTURE

    def test_live_change_keeps_index_and_reopens(self):
        view = StubCameraView(opened=True)
        params = LayoutParams(width=300, height=200)
        parent = self._four_siblings(view, params)

        Preview().set(view, PreviewControl.SURFACE)

        assert parent.index_of_child(view) == 2
        assert view.layout_params is params
        assert view.events == ["close", "preview:SURFACE", "open"]
        assert view.is_opened()

    def test_failed_change_restores_view_and_reopens(self):
        class RejectingCamera(StubCameraView):
            def set_preview(self, preview):
                raise RuntimeError("surface unavailable")

        view = RejectingCamera(opened=True, dispatch=CloseDispatch.DEFERRED)
        params = LayoutParams(width=300, height=200)
        parent = StubContainer(width=800, height=600)
        parent.add_view(StubView("a"))
        parent.add_view(view, 1, params)
        parent.add_view(StubView("c"))
        failures = []

        mutation = Preview().set(view, PreviewControl.TEXTURE)
        mutation.add_done_callback(lambda m: failures.append(m.error))
        with pytest.raises(RuntimeError):
            view.dispatch_pending()

        assert parent.index_of_child(view) == 1
        assert view.layout_params is params
        assert view.is_opened()
        assert mutation.done
        assert not mutation.applied
        assert len(failures) == 1
        assert pending_mutation(view) is None
        assert view.listener_count == 0

    def test_failed_change_raises_from_sync_close(self):
        class RejectingCamera(StubCameraView):
            def set_preview(self, preview):
                raise RuntimeError("surface unavailable")

        view = RejectingCamera(opened=True)
        parent = StubContainer(width=800, height=600)
        parent.add_view(view)

        with pytest.raises(RuntimeError):
            Preview().set(view, PreviewControl.SURFACE)

        assert parent.index_of_child(view) == 0
        assert view.is_opened()
        assert pending_mutation(view) is None

    def test_detached_view_is_changed_in_place(self):
        view = StubCameraView()
        Preview().set(view, PreviewControl.SURFACE)
        assert Preview().get(view) is PreviewControl.SURFACE
        assert view.parent is None

    def test_name(self):
        assert Preview().name == "Preview Surface"
        assert Engine().name == "Engine"


class TestAsyncCompletion:

    @pytest.mark.asyncio
    async def test_wait_for_loop_dispatched_close(self):
        view = StubCameraView(opened=True, dispatch=CloseDispatch.LOOP)
        mutation = Engine().set(view, EngineControl.CAMERA2)
        assert mutation.pending

        await mutation.wait(timeout=1.0)

        assert mutation.applied
        assert Engine().get(view) is EngineControl.CAMERA2
        assert view.is_opened()

    @pytest.mark.asyncio
    async def test_wait_raises_when_change_failed(self):
        class RejectingCamera(StubCameraView):
            def set_engine(self, engine):
                raise RuntimeError("engine unavailable")

        view = RejectingCamera(opened=True, dispatch=CloseDispatch.DEFERRED)
        mutation = Engine().set(view, EngineControl.CAMERA2)
        with pytest.raises(RuntimeError):
            view.dispatch_pending()

        with pytest.raises(RuntimeError, match="engine unavailable"):
            await mutation.wait(timeout=1.0)
        assert view.is_opened()

    @pytest.mark.asyncio
    async def test_wait_returns_immediately_when_applied(self, camera):
        mutation = Engine().set(camera, EngineControl.CAMERA2)
        assert await mutation.wait() is mutation
