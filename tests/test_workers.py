import pytest

from zoopark.workers import Worker, WorkerRole


@pytest.mark.parametrize(
    "role, label",
    [
        (WorkerRole.DIRECTOR, "Директор"),
        (WorkerRole.VETERINARIAN, "Ветеринар"),
        (WorkerRole.CLEANER, "Уборщик"),
        (WorkerRole.FOODMEN, "Кормилец"),
    ],
)
def test_role_label(role, label):
    worker = Worker("Someone", 100, role, 1, 1)
    assert worker.role_label() == label


def test_new_worker_is_working():
    worker = Worker("Someone", 500, WorkerRole.VETERINARIAN, 2, 7)
    assert worker.is_working is True
    assert worker.price == 500
    assert worker.id == 7


def test_start_day_resets_availability():
    worker = Worker("Someone", 300, WorkerRole.CLEANER, 1, 2)
    worker.is_working = False
    worker.start_day()
    assert worker.is_working is True