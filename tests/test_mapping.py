import operator

from graphquest.mapping import KeySet, Map, MapPair, MultiMap


def collect(mapping):
    seen = []
    pair = mapping.first()
    while pair is not None:
        seen.append((pair.key, pair.value))
        pair = mapping.next()
    return seen


def test_unsorted_map_insert_and_search():
    m = Map(is_equal=operator.eq)
    m.insert("b", 2)
    m.insert("a", 1)
    assert m.search("a") == MapPair("a", 1)
    assert m.search("z") is None
    assert [pair.key for pair in m] == ["b", "a"]


def test_duplicate_insert_is_ignored():
    m = Map(is_equal=operator.eq)
    m.insert("k", 1)
    m.insert("k", 2)
    assert len(m) == 1
    assert m.search("k").value == 1


def test_default_equality():
    m = Map()
    m.insert(3, "three")
    assert m.search(3).value == "three"
    assert m.search(4) is None


def test_sorted_map_orders_keys():
    m = Map(lower_than=operator.lt)
    for key in [5, 2, 8, 1]:
        m.insert(key, str(key))
    assert [pair.key for pair in m] == sorted([5, 2, 8, 1])


def test_sorted_map_equality_from_lower_than():
    m = Map(lower_than=lambda a, b: a.lower() < b.lower())
    m.insert("Hola", 1)
    m.insert("HOLA", 2)
    assert len(m) == 1
    assert m.search("hola").value == 1


def test_remove_returns_pair():
    m = Map(is_equal=operator.eq)
    m.insert("a", 1)
    m.insert("b", 2)
    removed = m.remove("a")
    assert removed == MapPair("a", 1)
    assert len(m) == 1
    assert m.remove("a") is None


def test_first_next_traversal():
    m = Map(is_equal=operator.eq)
    m.insert("x", 1)
    m.insert("y", 2)
    assert collect(m) == [("x", 1), ("y", 2)]


def test_clean_empties_map():
    m = Map()
    m.insert(1, 1)
    m.clean()
    assert len(m) == 0
    assert m.first() is None


def test_multimap_keeps_duplicates():
    mm = MultiMap(is_equal=operator.eq)
    mm.insert("k", 1)
    mm.insert("k", 2)
    assert len(mm) == 2
    assert mm.search("k").value == 1
    mm.remove("k")
    assert mm.search("k").value == 2


def test_sorted_multimap_is_stable():
    mm = MultiMap(lower_than=operator.lt)
    mm.insert(2, "a")
    mm.insert(1, "b")
    mm.insert(2, "c")
    assert collect(mm) == [(1, "b"), (2, "a"), (2, "c")]


def test_keyset_insert_search_remove():
    s = KeySet(is_equal=operator.eq)
    s.insert("rojo")
    s.insert("azul")
    s.insert("rojo")
    assert len(s) == 2
    assert s.search("azul") == "azul"
    assert s.remove("rojo") == "rojo"
    assert s.search("rojo") is None
    assert s.remove("rojo") is None


def test_sorted_keyset_iteration():
    s = KeySet(lower_than=operator.lt)
    for value in [3, 1, 2, 1]:
        s.insert(value)
    assert list(s) == [1, 2, 3]
    s.clean()
    assert list(s) == []