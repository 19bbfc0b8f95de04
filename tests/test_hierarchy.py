import pytest

from mengine.hierarchy import SceneHierarchy, fit_viewport


@pytest.mark.parametrize(
    "width,height,aspect",
    [(200, 100, 1.0), (100, 200, 1.0), (1920, 1080, 16 / 9), (300, 300, 4 / 3)],
)
def test_fit_viewport_keeps_aspect_and_fits(width, height, aspect):
    x, y, w, h = fit_viewport(width, height, aspect)
    assert w <= width + 1e-9 and h <= height + 1e-9
    assert w / h == pytest.approx(aspect)
    assert x == pytest.approx((width - w) / 2)
    assert y == pytest.approx((height - h) / 2)
    assert w == pytest.approx(width) or h == pytest.approx(height)


def test_fit_viewport_wide_region_limits_width():
    assert fit_viewport(200, 100, 1.0) == (50.0, 0.0, 100.0, 100.0)


def test_fit_viewport_tall_region_limits_height():
    assert fit_viewport(100, 200, 1.0) == (0.0, 50.0, 100.0, 100.0)


def test_fit_viewport_rejects_bad_aspect():
    with pytest.raises(ValueError):
        fit_viewport(100, 100, 0)


def test_create_entities_are_roots_in_order():
    scene = SceneHierarchy()
    a = scene.create_entity("A")
    b = scene.create_entity("B")
    assert scene.roots() == [a, b]
    assert scene.name_of(b) == "B"
    assert len(scene) == 2


def test_reparent_moves_between_parents():
    scene = SceneHierarchy()
    p1 = scene.create_entity("P1")
    p2 = scene.create_entity("P2")
    child = scene.create_entity("C")
    scene.reparent(child, p1)
    assert scene.children(p1) == [child]
    assert scene.roots() == [p1, p2]
    scene.reparent(child, p2)
    assert scene.children(p1) == []
    assert scene.children(p2) == [child]
    assert scene.parent_of(child) == p2


def test_reparent_same_parent_does_not_duplicate():
    scene = SceneHierarchy()
    parent = scene.create_entity("P")
    child = scene.create_entity("C")
    scene.reparent(child, parent)
    scene.reparent(child, parent)
    assert scene.children(parent) == [child]


def test_reparent_rejects_cycle():
    scene = SceneHierarchy()
    a = scene.create_entity("A")
    b = scene.create_entity("B")
    scene.reparent(b, a)
    with pytest.raises(ValueError):
        scene.reparent(a, b)
    with pytest.raises(ValueError):
        scene.reparent(a, a)


def test_unparent_makes_root():
    scene = SceneHierarchy()
    parent = scene.create_entity("P")
    child = scene.create_entity("C")
    scene.reparent(child, parent)
    scene.unparent(child)
    assert scene.children(parent) == []
    assert scene.parent_of(child) is None
    assert set(scene.roots()) == {parent, child}


def test_delete_removes_descendants_and_link():
    scene = SceneHierarchy()
    root = scene.create_entity("R")
    mid = scene.create_entity("M")
    leaf = scene.create_entity("L")
    other = scene.create_entity("O")
    scene.reparent(mid, root)
    scene.reparent(leaf, mid)
    scene.reparent(other, root)
    scene.delete(mid)
    assert mid not in scene and leaf not in scene
    assert scene.children(root) == [other]
    assert len(scene) == 2


def test_delete_unknown_is_ignored():
    scene = SceneHierarchy()
    a = scene.create_entity("A")
    scene.delete(a + 100)
    assert scene.roots() == [a]


def test_unknown_entity_raises():
    scene = SceneHierarchy()
    with pytest.raises(KeyError):
        scene.children(7)
    a = scene.create_entity("A")
    with pytest.raises(KeyError):
        scene.reparent(a, a + 1)