"""
Tests for the demo seeding script.
"""

from backend import seed_parcels as seed_module
from backend.app.models.parcel_enums import ParcelStatus
from backend.app.repositories.memory import InMemoryParcelStore


def test_seed_parcels_registers_each_address():
    store = InMemoryParcelStore()

    numbers = seed_module.seed_parcels(store, 42, ["a street", "b street"])

    assert numbers == [1, 2]
    stored = store.get_by_client(42)
    assert sorted(p.address for p in stored) == ["a street", "b street"]
    assert all(p.status == ParcelStatus.REGISTERED for p in stored)


def test_main_seeds_demo_client(monkeypatch, capsys, session_factory, sql_store):
    """Test the script entry point against the test database."""
    monkeypatch.setattr(seed_module, "SessionLocal", session_factory)
    monkeypatch.setattr(seed_module, "init_db", lambda: None)
    monkeypatch.setattr(seed_module, "configure_logging", lambda: None)

    seed_module.main()

    stored = sql_store.get_by_client(seed_module.DEMO_CLIENT)
    assert sorted(p.address for p in stored) == sorted(seed_module.DEMO_ADDRESSES)
    out = capsys.readouterr().out
    assert "Starting parcel seeding for Parcel Tracker" in out
    assert "Registered parcel" in out
