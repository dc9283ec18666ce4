from rodgame.collector import ItemCollectorSystem


class FakeItem:
    def __init__(self, box, journal, enabled=True):
        self.box = box
        self.enabled = enabled
        self.journal = journal

    def contains(self, point):
        x0, y0, x1, y1 = self.box
        return x0 <= point[0] < x1 and y0 <= point[1] < y1

    def collect(self):
        self.journal.append(self)


class FakeCollectable:
    def __init__(self, owner):
        self.owner = owner
        self.collected = False


def test_collects_items_under_location_newest_first():
    journal = []
    system = ItemCollectorSystem()
    first = FakeCollectable(FakeItem((0, 0, 10, 10), journal))
    second = FakeCollectable(FakeItem((5, 5, 15, 15), journal))
    far = FakeCollectable(FakeItem((50, 50, 60, 60), journal))
    for c in (first, second, far):
        system.register_component(c)
    assert system.collectables == (first, second, far)
    system.collect((7, 7))
    assert system.collectables == (first, second, far)
    assert journal == [second.owner, first.owner]
    assert first.collected and second.collected
    assert far.collected is False


def test_disabled_items_are_skipped():
    journal = []
    system = ItemCollectorSystem()
    hidden = FakeCollectable(FakeItem((0, 0, 10, 10), journal, enabled=False))
    system.register_component(hidden)
    system.collect((1, 1))
    assert system.collectables == (hidden,)
    assert journal == []
    assert hidden.collected is False


def test_unregister_and_clear():
    journal = []
    system = ItemCollectorSystem()
    a = FakeCollectable(FakeItem((0, 0, 10, 10), journal))
    b = FakeCollectable(FakeItem((0, 0, 10, 10), journal))
    system.register_component(a)
    system.register_component(b)
    system.unregister_component(a)
    system.unregister_component(FakeCollectable(None))
    assert system.collectables == (b,)
    system.collect((1, 1))
    assert journal == [b.owner]
    system.clear_all()
    assert system.collectables == ()