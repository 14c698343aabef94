"""Unit tests for pagify.services.pagination_state."""

import threading
import time

import pytest

from pagify.services import pagination_state
from pagify.services.pagination_state import (
    PaginationController,
    PaginationHandle,
    use_pagination,
)
from pagify.services.validation_service import ValidationError


def test_initial_state_is_empty(store):
    pager = PaginationController(store=store)
    assert pager.current_page == 1
    assert pager.total_item_count == 0
    assert pager.pagination.total_pages == 0
    assert pager.pagination.current_page == 0
    assert pager.has_next_page() is False
    assert pager.has_prev_page() is False


def test_next_and_prev_page(controller):
    controller.next_page()
    assert controller.pagination.current_page == 2
    controller.prev_page()
    assert controller.pagination.current_page == 1


def test_prev_page_stays_on_first_page(controller):
    controller.prev_page()
    assert controller.current_page == 1
    assert controller.has_prev_page() is False


def test_next_page_stays_on_last_page(controller):
    controller.go_to_page(10)
    controller.next_page()
    assert controller.current_page == 10
    assert controller.has_next_page() is False
    assert controller.has_prev_page() is True


def test_go_to_page_clamps(controller):
    controller.go_to_page(999)
    assert controller.current_page == 10
    controller.go_to_page(-3)
    assert controller.current_page == 1
    controller.go_to_page(6)
    assert controller.pagination.pages == (4, 5, 6, 7, 8)


def test_shrinking_total_clamps_on_read(controller):
    controller.go_to_page(10)
    controller.set_total_items(30)
    assert controller.pagination.current_page == 3
    assert controller.pagination.total_pages == 3


def test_set_total_items_rejects_negative(controller):
    with pytest.raises(ValidationError, match="cannot be negative"):
        controller.set_total_items(-1)
    assert controller.total_item_count == 95


def test_set_total_items_accepts_integer_strings(controller):
    controller.set_total_items("40")
    assert controller.pagination.total_pages == 4


def test_set_page_size_resets_to_first_page(controller):
    controller.go_to_page(5)
    controller.set_page_size(25)
    assert controller.current_page == 1
    assert controller.pagination.page_size == 25
    assert controller.pagination.total_pages == 4


def test_set_page_size_same_value_keeps_page(controller):
    controller.go_to_page(5)
    controller.set_page_size(10)
    assert controller.current_page == 5


def test_set_page_size_rejects_zero(controller):
    with pytest.raises(ValidationError, match="page_size"):
        controller.set_page_size(0)
    assert controller.page_size == 10


def test_reset(controller):
    controller.go_to_page(7)
    controller.reset()
    assert controller.current_page == 1


def test_state_survives_controller_recreation(store, controller):
    controller.go_to_page(4)
    rebuilt = PaginationController(page_size=10, max_pages=5, store=store)
    assert rebuilt.current_page == 4
    assert rebuilt.total_item_count == 95


def test_keys_isolate_controllers(store, controller):
    other = PaginationController(store=store, key="other")
    other.set_total_items(20)
    other.next_page()
    controller.go_to_page(3)
    assert other.current_page == 2
    assert controller.current_page == 3


def test_handlers_are_bound_to_controller(controller):
    handlers = controller.handlers
    handlers.next_page()
    handlers.next_page()
    handlers.prev_page()
    assert controller.current_page == 2
    handlers.go_to_page(9)
    assert handlers.has_next_page() is True
    handlers.set_total_items(90)
    assert handlers.has_next_page() is False
    assert handlers.has_prev_page() is True


def test_use_pagination_returns_snapshot_and_handlers(store):
    handle = use_pagination(page_size=10, max_pages=5, store=store)
    assert isinstance(handle, PaginationHandle)
    handle.handlers.set_total_items(95)
    handle.handlers.next_page()
    assert handle.pagination.total_items == 0

    refreshed = use_pagination(page_size=10, max_pages=5, store=store)
    assert refreshed.pagination.current_page == 2
    assert refreshed.pagination.total_pages == 10


def test_concurrent_next_page_calls_are_serialized(store):
    pager = PaginationController(page_size=1, store=store)
    pager.set_total_items(10_000)

    def advance():
        for _ in range(100):
            pager.next_page()

    workers = [threading.Thread(target=advance) for _ in range(8)]
    for worker in workers:
        worker.start()
    for worker in workers:
        worker.join()

    assert pager.current_page == 801


class SlowStore(dict):
    """Dict whose reads yield the GIL, widening read-modify-write windows."""

    def __getitem__(self, key):
        time.sleep(0.001)
        return super().__getitem__(key)


@pytest.fixture
def default_store(monkeypatch):
    fresh: dict = {}
    monkeypatch.setattr(pagination_state, "DEFAULT_STORE", fresh)
    return fresh


def test_use_pagination_default_store_keeps_commits(default_store):
    handle = use_pagination()
    handle.handlers.set_total_items(95)
    handle.handlers.next_page()

    refreshed = use_pagination()
    assert refreshed.pagination.current_page == 2
    assert refreshed.pagination.total_pages == 10
    assert default_store["pagination_current_page"] == 2


def test_controllers_without_store_share_default_store(default_store):
    first = PaginationController()
    first.set_total_items(95)
    first.go_to_page(6)
    assert PaginationController().current_page == 6


def test_controllers_sharing_a_store_share_one_lock():
    store = SlowStore()
    first = PaginationController(page_size=1, store=store)
    second = PaginationController(page_size=1, store=store)
    first.set_total_items(1_000)

    def advance(pager):
        for _ in range(50):
            pager.next_page()

    workers = [threading.Thread(target=advance, args=(pager,)) for pager in (first, second)]
    for worker in workers:
        worker.start()
    for worker in workers:
        worker.join()

    assert first._lock is second._lock
    assert second.current_page == 101
