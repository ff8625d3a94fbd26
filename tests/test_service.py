"""Tests for the submit / retrieve service."""

import pytest

from knightpath.errors import DuplicateRecordError, InvalidSquareError, RecordNotFoundError
from knightpath.service import KnightPathService
from knightpath.store import ResultStore


class _RecordingStore(ResultStore):
    def __init__(self, path) -> None:
        super().__init__(path)
        self.saved = 0

    def save(self, record) -> None:
        self.saved += 1
        super().save(record)


@pytest.fixture
def service(store: ResultStore) -> KnightPathService:
    return KnightPathService(store)


class TestSubmit:
    def test_submit_a1_b3(self, service: KnightPathService) -> None:
        operation_id = service.submit("A1", "B3")
        record = service.retrieve(operation_id)
        assert record.starting == "A1"
        assert record.ending == "B3"
        assert record.shortest_path == "A1:B3"
        assert record.number_of_moves == 1

    def test_submit_returns_fresh_ids(self, service: KnightPathService) -> None:
        ids = {service.submit("A1", "H8") for _ in range(5)}
        assert len(ids) == 5
        assert len(service.store.records()) == 5

    def test_lowercase_labels_stored_upper(self, service: KnightPathService) -> None:
        record = service.retrieve(service.submit("a1", "h8"))
        assert (record.starting, record.ending) == ("A1", "H8")
        assert record.number_of_moves == 6

    def test_custom_id_factory(self, store: ResultStore) -> None:
        service = KnightPathService(store, new_id=lambda: "fixed-id")
        assert service.submit("B1", "C3") == "fixed-id"
        assert service.retrieve("fixed-id").shortest_path == "B1:C3"

    def test_repeated_id_is_rejected(self, store: ResultStore) -> None:
        service = KnightPathService(store, new_id=lambda: "dup")
        service.submit("A1", "B3")
        with pytest.raises(DuplicateRecordError):
            service.submit("A1", "H8")
        assert service.retrieve("dup").ending == "B3"

    @pytest.mark.parametrize("source, target", [("Z9", "A1"), ("A1", "Z9"), ("", "A1")])
    def test_invalid_square_rejected_before_store(self, store_path, source: str, target: str) -> None:
        store = _RecordingStore(store_path)
        service = KnightPathService(store)
        with pytest.raises(InvalidSquareError):
            service.submit(source, target)
        assert store.saved == 0
        assert not store_path.exists()


class TestRetrieve:
    def test_unknown_id(self, service: KnightPathService) -> None:
        service.submit("A1", "B3")
        with pytest.raises(RecordNotFoundError):
            service.retrieve("no-such-id")


class TestCompute:
    def test_compute_does_not_persist(self, service: KnightPathService) -> None:
        result = service.compute("A1", "H8")
        assert result.number_of_moves == 6
        assert service.store.records() == []

    def test_compute_validates(self, service: KnightPathService) -> None:
        with pytest.raises(InvalidSquareError):
            service.compute("A1", "I9")
