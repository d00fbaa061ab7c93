"""Configuration, storage wiring and bootstrap tests."""

from pathlib import Path
import sys

import pytest

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from bootstrap_script import bootstrap, describe  # noqa: E402
from Database.db import FrontDeskDB, FrontDeskSettings, load_configuration  # noqa: E402


def test_load_configuration_reads_environment(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("FRONTDESK_DATA_DIR", str(tmp_path / "desk"))
    monkeypatch.setenv("FRONTDESK_TOTAL_ROOMS", "9")

    settings = load_configuration()

    assert settings.data_dir == tmp_path / "desk"
    assert settings.total_rooms == 9
    assert settings.rooms_path == tmp_path / "desk" / "rooms.txt"


def test_load_configuration_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("FRONTDESK_DATA_DIR", raising=False)
    monkeypatch.delenv("FRONTDESK_TOTAL_ROOMS", raising=False)
    monkeypatch.setattr("Database.db.load_dotenv", lambda: False)

    settings = load_configuration()

    assert settings.data_dir == Path("data")
    assert settings.total_rooms == 15


@pytest.mark.parametrize("value", ["0", "-3", "lots"])
def test_load_configuration_rejects_bad_room_count(value: str, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("FRONTDESK_TOTAL_ROOMS", value)

    with pytest.raises(ValueError):
        load_configuration()


def test_front_desk_db_shares_stores_with_billing(tmp_path: Path) -> None:
    db = FrontDeskDB(FrontDeskSettings(data_dir=tmp_path / "data", total_rooms=6))
    db.customers.add("Alice", "555")
    db.rooms.book(4, 1)

    assert db.billing.generate_bill(4).customer_name == "Alice"  # type: ignore[union-attr]
    assert (tmp_path / "data" / "rooms.txt").exists()


def test_bootstrap_initializes_then_reloads(tmp_path: Path) -> None:
    """Ensure the first bootstrap creates rooms and a second one keeps them."""
    settings = FrontDeskSettings(data_dir=tmp_path, total_rooms=6)

    first = bootstrap(settings)
    first.rooms.book(1, 1)
    first.customers.add("Alice", "555")
    second = bootstrap(FrontDeskSettings(data_dir=tmp_path, total_rooms=30))

    assert len(second.rooms) == 6
    assert describe(second) == [
        "Single: 2 rooms",
        "Double: 2 rooms",
        "Suite: 2 rooms",
        "Occupied: 1",
        "Customers: 1",
    ]
