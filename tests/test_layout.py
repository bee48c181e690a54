import pytest

from room_design_ai.models.schemas import FurnitureItem
from room_design_ai.services.layout import (
    check_layout,
    clamp_position,
    find_overlaps,
    is_within_room,
    item_to_polygon,
    items_overlap,
)


def item(id, x, y, width, height, rotation=0, name=None):
    return FurnitureItem(id=id, name=name or id, x=x, y=y, width=width, height=height, rotation=rotation)


def test_identical_bounds_overlap():
    assert items_overlap(item("a", 0, 0, 10, 10), item("b", 0, 0, 10, 10))


def test_separated_on_x_axis_do_not_overlap():
    assert not items_overlap(item("a", 0, 0, 10, 10), item("b", 20, 0, 10, 10))


def test_touching_edges_do_not_overlap():
    assert not items_overlap(item("a", 0, 0, 10, 10), item("b", 10, 0, 10, 10))
    assert not items_overlap(item("a", 0, 0, 10, 10), item("b", 0, 10, 10, 10))


def test_partial_and_contained_overlap():
    assert items_overlap(item("a", 0, 0, 10, 10), item("b", 5, 5, 10, 10))
    assert items_overlap(item("a", 0, 0, 100, 100), item("b", 40, 40, 10, 10))


def test_rotation_swaps_footprint_about_centre():
    bounds = item_to_polygon(item("tv", 0, 0, 80, 20, rotation=90)).bounds
    assert bounds == pytest.approx((30.0, -30.0, 50.0, 50.0))


def test_find_overlaps_reports_pairs_in_input_order():
    items = [
        item("bed", 20, 20, 80, 60),
        item("wardrobe", 250, 10, 60, 30),
        item("desk", 60, 50, 50, 30),
        item("shelf", 90, 70, 40, 20),
    ]

    pairs = [(p.first_id, p.second_id) for p in find_overlaps(items)]

    assert pairs == [("bed", "desk"), ("bed", "shelf"), ("desk", "shelf")]


def test_overlap_area_is_reported():
    overlaps = find_overlaps([item("a", 0, 0, 10, 10), item("b", 5, 5, 10, 10)])
    assert overlaps[0].overlap_area == pytest.approx(25.0)


def test_room_bounds():
    assert is_within_room(item("bed", 320, 240, 80, 60))
    assert not is_within_room(item("bed", 330, 240, 80, 60))
    assert not is_within_room(item("tv", 0, 0, 80, 20, rotation=90))


def test_clamp_position():
    assert clamp_position(item("bed", 380, -15, 80, 60)) == (320, 0)
    assert clamp_position(item("bed", 10, 20, 80, 60)) == (10, 20)


def test_clamp_uses_rotated_footprint():
    tv = item("tv", 0, 0, 80, 20, rotation=90)

    x, y = clamp_position(tv)

    assert (x, y) == (pytest.approx(0), pytest.approx(30))
    assert is_within_room(tv.model_copy(update={"x": x, "y": y}))


def test_check_layout_warnings():
    items = [
        item("1", 20, 20, 80, 60, name="Bed (Queen)"),
        item("2", 50, 40, 60, 30, name="Wardrobe"),
        item("3", 390, 10, 25, 25, name="Side Table"),
    ]

    overlaps, out_of_bounds, warnings = check_layout(items)

    assert len(overlaps) == 1
    assert out_of_bounds == ["3"]
    assert warnings == [
        "Bed (Queen) overlaps with Wardrobe",
        "Side Table is outside the room",
    ]


def test_empty_layout_has_no_warnings():
    assert check_layout([]) == ([], [], [])


def test_layout_check_endpoint(client):
    response = client.post("/api/layout/check", json={
        "items": [
            {"id": "1", "name": "Bed (Queen)", "x": 20, "y": 20, "width": 80, "height": 60},
            {"id": "2", "name": "Wardrobe", "x": 250, "y": 10, "width": 60, "height": 30},
        ]
    })

    assert response.status_code == 200
    data = response.json()
    assert data["ok"] is True
    assert data["warnings"] == []


def test_layout_check_endpoint_rejects_zero_size(client):
    response = client.post("/api/layout/check", json={
        "items": [{"id": "1", "name": "Bed", "width": 0, "height": 60}]
    })
    assert response.status_code == 422


def test_layout_clamp_endpoint(client):
    response = client.post("/api/layout/clamp", json={
        "item": {"id": "7", "name": "TV Unit", "x": 0, "y": 0, "width": 80, "height": 20, "rotation": 90}
    })

    assert response.status_code == 200
    data = response.json()
    assert data["id"] == "7"
    assert data["rotation"] == 90
    assert data["x"] == pytest.approx(0)
    assert data["y"] == pytest.approx(30)
