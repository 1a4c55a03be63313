import numpy as np
import unittest

from AATree.AATreeArray import (
    AATreeSet,
    BOTTOM,
    LEFT,
    LEVEL,
    PARENT,
    RIGHT,
    find_violation,
    fix_after_erase,
    get_next,
    get_previous,
    go_left,
    go_right,
    skew,
    split,
)


def make_links(*rows) -> np.ndarray:
    """Arena with the sentinel at row 0 followed by the given [left, right, parent, level] rows."""
    links = np.zeros((len(rows) + 1, 4), dtype=np.int64)
    for index, row in enumerate(rows, start=1):
        links[index] = row
    return links


class TestSkew(unittest.TestCase):
    def test_left_horizontal_link_is_rotated_away(self) -> None:
        links = make_links(
            [2, 0, 0, 1],
            [0, 0, 1, 1],
        )

        new_root = skew(links, 1)

        self.assertEqual(new_root, 2)
        self.assertEqual(links[2, RIGHT], 1)
        self.assertEqual(links[2, PARENT], BOTTOM)
        self.assertEqual(links[1, PARENT], 2)
        self.assertEqual(links[1, LEFT], BOTTOM)

    def test_grandparent_is_relinked(self) -> None:
        links = make_links(
            [2, 0, 4, 1],
            [0, 3, 1, 1],
            [0, 0, 2, 1],
            [1, 0, 0, 2],
        )

        new_root = skew(links, 1)

        self.assertEqual(new_root, 2)
        self.assertEqual(links[4, LEFT], 2)
        self.assertEqual(links[2, PARENT], 4)
        # the subtree that changed sides hangs off the rotated node now
        self.assertEqual(links[1, LEFT], 3)
        self.assertEqual(links[3, PARENT], 1)

    def test_legal_node_is_unchanged(self) -> None:
        links = make_links(
            [2, 0, 0, 2],
            [0, 0, 1, 1],
        )
        before = links.copy()

        self.assertEqual(skew(links, 1), 1)
        np.testing.assert_array_equal(links, before)

    def test_sentinel_is_a_no_op(self) -> None:
        links = make_links([0, 0, 0, 1])

        self.assertEqual(skew(links, BOTTOM), BOTTOM)
        self.assertTrue((links[BOTTOM] == 0).all())


class TestSplit(unittest.TestCase):
    def test_double_right_horizontal_link_is_split(self) -> None:
        links = make_links(
            [0, 2, 0, 1],
            [0, 3, 1, 1],
            [0, 0, 2, 1],
        )

        new_root = split(links, 1)

        self.assertEqual(new_root, 2)
        self.assertEqual(links[2, LEVEL], 2)
        self.assertEqual(links[2, LEFT], 1)
        self.assertEqual(links[2, RIGHT], 3)
        self.assertEqual(links[1, PARENT], 2)
        self.assertEqual(links[3, PARENT], 2)
        self.assertEqual(links[2, PARENT], BOTTOM)
        self.assertEqual(links[1, RIGHT], BOTTOM)

    def test_single_right_horizontal_link_is_legal(self) -> None:
        links = make_links(
            [0, 2, 0, 1],
            [0, 0, 1, 1],
        )
        before = links.copy()

        self.assertEqual(split(links, 1), 1)
        np.testing.assert_array_equal(links, before)

    def test_sentinel_is_a_no_op(self) -> None:
        links = make_links([0, 0, 0, 1])

        self.assertEqual(split(links, BOTTOM), BOTTOM)
        self.assertTrue((links[BOTTOM] == 0).all())


class TestFixAfterErase(unittest.TestCase):
    def test_level_drops_when_a_child_is_two_levels_down(self) -> None:
        # 2 (level 2) lost its left subtree; right child 3 is a level-1 leaf
        links = make_links(
            [0, 0, 0, 0],
            [0, 3, 0, 2],
            [0, 0, 2, 1],
        )

        new_root = fix_after_erase(links, 2)

        self.assertEqual(new_root, 2)
        self.assertEqual(links[2, LEVEL], 1)
        self.assertEqual(links[3, LEVEL], 1)

    def test_balanced_node_is_unchanged(self) -> None:
        links = make_links(
            [0, 0, 2, 1],
            [1, 3, 0, 2],
            [0, 0, 2, 1],
        )
        before = links.copy()

        self.assertEqual(fix_after_erase(links, 2), 2)
        np.testing.assert_array_equal(links, before)

    def test_sentinel_is_a_no_op(self) -> None:
        links = make_links([0, 0, 0, 1])

        self.assertEqual(fix_after_erase(links, BOTTOM), BOTTOM)


class TestTraversalKernels(unittest.TestCase):
    def setUp(self) -> None:
        self.tree = AATreeSet([8, 3, 10, 1, 6, 14, 4, 7, 13])
        self.links = self.tree._links

    def test_go_left_and_go_right_find_extremes(self) -> None:
        root = self.tree._root

        self.assertEqual(self.tree._values[go_left(self.links, root)], 1)
        self.assertEqual(self.tree._values[go_right(self.links, root)], 14)
        self.assertEqual(go_left(self.links, BOTTOM), BOTTOM)
        self.assertEqual(go_right(self.links, BOTTOM), BOTTOM)

    def test_get_next_walks_in_order(self) -> None:
        node = go_left(self.links, self.tree._root)
        seen = []
        while node != BOTTOM:
            seen.append(self.tree._values[node])
            node = get_next(self.links, node)

        self.assertListEqual(seen, [1, 3, 4, 6, 7, 8, 10, 13, 14])

    def test_get_previous_walks_in_reverse(self) -> None:
        node = go_right(self.links, self.tree._root)
        seen = []
        while node != BOTTOM:
            seen.append(self.tree._values[node])
            node = get_previous(self.links, node)

        self.assertListEqual(seen, [14, 13, 10, 8, 7, 6, 4, 3, 1])


class TestFindViolation(unittest.TestCase):
    def test_sound_tree(self) -> None:
        links = make_links(
            [0, 0, 2, 1],
            [1, 3, 0, 2],
            [0, 0, 2, 1],
        )

        node, count = find_violation(links, 2)

        self.assertEqual(node, -1)
        self.assertEqual(count, 3)

    def test_empty_tree(self) -> None:
        self.assertEqual(tuple(find_violation(make_links(), BOTTOM)), (-1, 0))

    def test_leaf_above_level_one(self) -> None:
        links = make_links([0, 0, 0, 2])

        self.assertEqual(find_violation(links, 1)[0], 1)

    def test_left_horizontal_link(self) -> None:
        links = make_links(
            [2, 0, 0, 1],
            [0, 0, 1, 1],
        )

        self.assertEqual(find_violation(links, 1)[0], 1)

    def test_double_right_horizontal_link(self) -> None:
        links = make_links(
            [0, 2, 0, 1],
            [0, 3, 1, 1],
            [0, 0, 2, 1],
        )

        self.assertEqual(find_violation(links, 1)[0], 1)

    def test_broken_parent_link(self) -> None:
        links = make_links(
            [0, 0, 3, 1],
            [1, 3, 0, 2],
            [0, 0, 2, 1],
        )

        self.assertEqual(find_violation(links, 2)[0], 1)

    def test_cycle_is_reported(self) -> None:
        links = make_links(
            [0, 2, 0, 1],
            [0, 1, 1, 1],
        )

        self.assertNotEqual(find_violation(links, 1)[0], -1)
