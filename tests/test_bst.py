import pytest

from dsakit.bst import BinarySearchTree, InOrderIterator

TEST_DATA = [64, 32, 96, 16, 48, 80, 112, 8, 24, 56, 88, 104, 120]
GOOD_PATH_SUMS = [120, 136, 200, 328, 376, 392]
RANGE_SUMS = [
    (8, 120, 848),
    (0, 200, 848),
    (2, 40, 80),
    (24, 60, 160),
    (30, 90, 368),
    (60, 70, 64),
    (60, 112, 544),
    (84, 110, 288),
    (96, 96, 96),
    (125, 200, 0),
]
TO_REMOVE = [16, 48, 64, 104]


@pytest.fixture
def tree():
    bst = BinarySearchTree()
    for key in TEST_DATA:
        bst.insert(key, f"v{key}")
    return bst


def test_size(tree):
    assert len(tree) == 13


def test_height(tree):
    assert tree.height() == 3


def test_height_of_empty_and_single():
    bst = BinarySearchTree()
    assert bst.height() == -1
    bst.insert(5, "x")
    assert bst.height() == 0


def test_get_present(tree):
    for key in TEST_DATA:
        assert tree.get(key) == f"v{key}"
        assert key in tree


def test_get_absent(tree):
    for key in range(max(TEST_DATA)):
        if key not in TEST_DATA:
            assert tree.get(key) is None
            assert key not in tree


@pytest.mark.parametrize("total", GOOD_PATH_SUMS)
def test_good_path_sums(tree, total):
    assert tree.path_sum(total) is True


def test_bad_path_sums(tree):
    bad = [i for i in range(0, GOOD_PATH_SUMS[-1], 4) if i not in GOOD_PATH_SUMS and tree.path_sum(i)]
    assert bad == []


def test_path_sum_empty_tree():
    bst = BinarySearchTree()
    assert bst.path_sum(0) is True
    assert bst.path_sum(3) is False


@pytest.mark.parametrize("lower,upper,expected", RANGE_SUMS)
def test_range_sums(tree, lower, upper, expected):
    assert tree.range_sum(lower, upper) == expected


def test_remove(tree):
    for key in TO_REMOVE:
        tree.remove(key)
        assert tree.get(key) is None
    assert len(tree) == 9
    for key in sorted(TEST_DATA):
        if key not in TO_REMOVE:
            assert tree.get(key) == f"v{key}"


def test_remove_keeps_order(tree):
    for key in TO_REMOVE:
        tree.remove(key)
    keys = [key for key, _ in tree]
    assert keys == sorted(set(TEST_DATA) - set(TO_REMOVE))


def test_remove_absent_is_noop(tree):
    tree.remove(7)
    assert len(tree) == 13


def test_insert_existing_replaces_value(tree):
    tree.insert(48, "new")
    assert tree.get(48) == "new"
    assert len(tree) == 13


def test_iterator_in_order(tree):
    iterator = InOrderIterator(tree)
    seen = []
    while iterator.has_next():
        seen.append(next(iterator))
    assert seen == [(key, f"v{key}") for key in sorted(TEST_DATA)]
    assert iterator.has_next() is False


def test_iterator_exhausted_raises(tree):
    iterator = iter(tree)
    assert len(list(iterator)) == 13
    with pytest.raises(StopIteration):
        next(iterator)


def test_iterator_empty_tree():
    iterator = InOrderIterator(BinarySearchTree())
    assert iterator.has_next() is False
    assert list(iterator) == []


def test_dict_from_tree(tree):
    assert dict(tree) == {key: f"v{key}" for key in TEST_DATA}