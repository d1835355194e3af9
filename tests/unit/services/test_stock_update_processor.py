# tests/unit/services/test_stock_update_processor.py
from app.core.enums import ResolutionStrategy, AUTOMATIC_STRATEGIES
from app.schemas.stock import StockUpdate
from app.services.status_service import derive_status
from app.services.stock_update_processor import MIN_CONFLICT_DURATION_MS, MAX_CONFLICT_DURATION_MS


def _update(new_stock, version, product_id="prod_000000", vendor_id="vendor_a"):
    return StockUpdate(product_id=product_id, vendor_id=vendor_id, new_stock=new_stock, version=version)


def test_matching_version_applies_directly(services):
    result = services.processor.apply_update(_update(42, 1))

    product = services.catalog.get_product("prod_000000")
    assert result.success is True
    assert result.conflict is False
    assert result.resolution is None
    assert product.current_stock == 42
    assert product.version == 2
    assert (product.status, product.days_of_stock_left) == derive_status(42, 30, 200, 10.0)
    assert services.catalog.list_herd_events() == []


def test_unknown_product_is_not_found_without_side_effects(services):
    result = services.processor.apply_update(_update(42, 1, product_id="prod_999999"))

    assert result.success is False
    assert result.conflict is False
    assert services.catalog.list_herd_events() == []
    assert all(p.version == 1 for p in services.catalog.list_products())


def test_stale_version_triggers_resolution(services):
    services.processor.apply_update(_update(42, 1, vendor_id="vendor_a"))

    # vendor_b still thinks the product is at version 1
    result = services.processor.apply_update(_update(77, 1, vendor_id="vendor_b"))

    product = services.catalog.get_product("prod_000000")
    assert result.success is True
    assert result.conflict is True
    assert result.resolution is not None
    assert result.resolution.strategy in AUTOMATIC_STRATEGIES
    # only one update was pending, so every strategy picks it
    assert result.resolution.resolved_stock == 77
    assert product.current_stock == 77
    assert product.version == 3
    assert services.catalog.pending_updates("prod_000000") == []


def test_version_ahead_of_current_is_also_a_conflict(services):
    result = services.processor.apply_update(_update(10, 5))

    assert result.conflict is True
    assert services.catalog.get_product("prod_000000").version == 2


def test_conflict_records_single_product_herd_event(services):
    result = services.processor.apply_update(_update(60, 3))

    events = services.catalog.list_herd_events()
    assert len(events) == 1
    event = events[0]
    assert event.id == "herd_0"
    assert event.vendor_count == 1
    assert event.products_affected == 1
    assert event.conflicts_detected == 1
    assert event.resolved is True
    assert event.strategy == result.resolution.strategy
    assert MIN_CONFLICT_DURATION_MS <= event.duration <= MAX_CONFLICT_DURATION_MS


def test_resolution_covers_whole_pending_buffer(services):
    earlier = _update(40, 1, vendor_id="vendor_a")
    services.catalog.add_pending(earlier)

    result = services.processor.apply_update(
        _update(60, 9, vendor_id="vendor_b"),
        strategy=ResolutionStrategy.AVERAGE
    )

    assert result.resolution.resolved_stock == 50
    assert [u.vendor_id for u in result.resolution.updates] == ["vendor_a", "vendor_b"]
    assert services.catalog.list_herd_events()[0].vendor_count == 2
    assert services.catalog.pending_updates("prod_000000") == []


def test_last_write_wins_uses_arrival_order(services):
    services.catalog.add_pending(_update(10, 1, vendor_id="vendor_a"))
    services.catalog.add_pending(_update(20, 1, vendor_id="vendor_b"))

    result = services.processor.apply_update(
        _update(30, 7, vendor_id="vendor_c"),
        strategy=ResolutionStrategy.LAST_WRITE_WINS
    )

    assert result.resolution.resolved_stock == 30


def test_every_mutation_bumps_version_by_one(services):
    versions = [services.catalog.get_product("prod_000002").version]
    for i, stale in enumerate([False, True, False, True, True]):
        current = services.catalog.get_product("prod_000002").version
        services.processor.apply_update(
            _update(10 * (i + 1), current - 1 if stale else current, product_id="prod_000002")
        )
        versions.append(services.catalog.get_product("prod_000002").version)

    assert versions == [1, 2, 3, 4, 5, 6]
