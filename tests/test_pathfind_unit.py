import random
import unittest

from game import (
    Symbol,
    Tile,
    lay_out,
    create_board,
    find_path,
    can_connect,
    line_clear,
    corner_usable,
    path_turns,
    InvalidArgumentError,
)


class TestPathfindUnit(unittest.TestCase):
    def _mk_board(self, rows):
        # '.' marks an already matched cell
        h = len(rows)
        w = len(rows[0])
        tiles = []
        for r in rows:
            assert len(r) == w
            for ch in r:
                tiles.append(Tile(id=len(tiles), symbol=Symbol(key=ord(ch), glyph=ch, color=''), matched=(ch == '.')))
        return lay_out(h, w, tiles)

    def test_given_row_with_obstacle_when_probing_then_only_inner_cells_count(self):
        board = self._mk_board([['X', 'Y', '.', 'X']])
        a, b = board.at(0, 0), board.at(0, 3)
        self.assertFalse(line_clear(board, (0, 0), (0, 3), a, b))
        self.assertTrue(line_clear(board, (0, 1), (0, 3), a, b))  # endpoints never block
        self.assertTrue(line_clear(board, (0, 2), (0, 2), a, b))
        self.assertFalse(line_clear(board, (0, 0), (1, 1), a, b))  # not a straight line

    def test_given_selected_tile_inside_probe_when_probing_then_it_does_not_block(self):
        board = self._mk_board([['Y', 'X', 'Y', 'X']])
        a, b = board.at(0, 1), board.at(0, 3)
        # (0,1) lies strictly between (0,0) and (0,2) but is one of the selected tiles
        self.assertTrue(line_clear(board, (0, 0), (0, 2), a, b))
        self.assertFalse(line_clear(board, (0, 0), (0, 3), a, b))

    def test_given_corner_candidates_when_checking_usability_then_bounds_and_state_apply(self):
        board = self._mk_board([
            ['X', '.'],
            ['Y', 'X'],
        ])
        a, b = board.at(0, 0), board.at(1, 1)
        self.assertTrue(corner_usable(board, (0, 1), a, b))
        self.assertFalse(corner_usable(board, (1, 0), a, b))
        self.assertTrue(corner_usable(board, (1, 1), a, b))
        self.assertFalse(corner_usable(board, (2, 1), a, b))
        self.assertFalse(corner_usable(board, (0, -1), a, b))

    def test_given_vertical_neighbours_when_finding_then_direct_path(self):
        board = self._mk_board([
            ['X', 'Y'],
            ['X', 'Y'],
        ])
        self.assertEqual(find_path(board, (0, 0), (1, 0)), [(0, 0), (1, 0)])
        self.assertEqual(find_path(board, (1, 1), (0, 1)), [(1, 1), (0, 1)])

    def test_given_both_corners_open_when_finding_then_first_corner_preferred(self):
        board = self._mk_board([
            ['X', '.'],
            ['.', 'X'],
        ])
        path = find_path(board, (0, 0), (1, 1))
        self.assertEqual(path, [(0, 0), (0, 1), (1, 1)])
        self.assertEqual(path_turns(path), 1)
        self.assertEqual(find_path(board, (1, 1), (0, 0)), [(1, 1), (0, 1), (0, 0)])

    def test_given_only_second_corner_open_when_finding_then_second_corner_used(self):
        board = self._mk_board([
            ['X', 'Y'],
            ['.', 'X'],
        ])
        self.assertEqual(find_path(board, (0, 0), (1, 1)), [(0, 0), (1, 0), (1, 1)])

    def test_given_column_detour_when_finding_then_two_corner_path(self):
        board = self._mk_board([
            ['.', 'X', 'Y'],
            ['.', 'Z', 'Y'],
            ['.', 'X', 'Z'],
        ])
        path = find_path(board, (0, 1), (2, 1))
        self.assertEqual(path, [(0, 1), (0, 0), (2, 0), (2, 1)])
        self.assertEqual(path_turns(path), 2)

    def test_given_row_detour_when_columns_fail_then_row_scan_used(self):
        board = self._mk_board([
            ['.', '.', '.'],
            ['X', 'Y', 'X'],
            ['Y', 'Z', 'Z'],
        ])
        self.assertEqual(find_path(board, (1, 0), (1, 2)), [(1, 0), (0, 0), (0, 2), (1, 2)])

    def test_given_column_and_row_detours_when_finding_then_columns_win(self):
        board = self._mk_board([
            ['X', '.', '.', 'Y'],
            ['.', '.', '.', '.'],
            ['.', '.', '.', '.'],
            ['Y', '.', '.', 'X'],
        ])
        self.assertEqual(find_path(board, (0, 0), (3, 3)), [(0, 0), (0, 1), (3, 1), (3, 3)])
        self.assertEqual(find_path(board, (3, 3), (0, 0)), [(3, 3), (3, 1), (0, 1), (0, 0)])

    def test_given_path_needing_three_turns_when_finding_then_empty(self):
        board = self._mk_board([
            ['X', 'Y', 'Z'],
            ['W', '.', 'Z'],
            ['Y', 'W', 'X'],
        ])
        self.assertEqual(find_path(board, (0, 0), (2, 2)), [])

    def test_given_unmatchable_pairs_when_finding_then_empty_not_error(self):
        board = self._mk_board([['X', 'Y', '.', 'X']])
        self.assertEqual(find_path(board, (0, 0), (0, 1)), [])  # different symbols
        self.assertEqual(find_path(board, (0, 0), (0, 0)), [])  # same tile
        matched = self._mk_board([['X', 'X']])
        matched.at(0, 1).mark_matched()
        self.assertEqual(find_path(matched, (0, 0), (0, 1)), [])

    def test_given_tile_objects_when_finding_then_same_result_as_coordinates(self):
        board = self._mk_board([
            ['X', '.', '.'],
            ['Y', 'Y', 'X'],
        ])
        a, b = board.at(0, 0), board.at(1, 2)
        self.assertEqual(find_path(board, a, b), find_path(board, (0, 0), [1, 2]))

    def test_given_malformed_arguments_when_finding_then_invalid_argument(self):
        board = self._mk_board([['X', 'X']])
        stranger = Tile(id=99, symbol=Symbol(key=ord('X'), glyph='X', color=''), row=0, col=1)
        bad_calls = [
            (None, (0, 0), (0, 1)),
            ([['X', 'X']], (0, 0), (0, 1)),
            (board, None, (0, 1)),
            (board, (0, 0), None),
            (board, (0, 0), (0, 2)),
            (board, (-1, 0), (0, 1)),
            (board, (0, 0), 'a1'),
            (board, (0, 0), (0, 1, 2)),
            (board, (0, 0), stranger),
        ]
        for args in bad_calls:
            with self.assertRaises(InvalidArgumentError, msg=repr(args[1:])):
                find_path(*args)
        with self.assertRaises(InvalidArgumentError):
            can_connect(board, (0, 0), (5, 5))

    def test_given_malformed_arguments_when_finding_then_warning_logged(self):
        board = self._mk_board([['X', 'X']])
        with self.assertLogs('lianliankan_core.pathfind', level='WARNING') as logs:
            with self.assertRaises(InvalidArgumentError):
                find_path(board, (0, 0), (4, 4))
            with self.assertRaises(InvalidArgumentError):
                find_path(None, (0, 0), (0, 1))
        self.assertEqual(len(logs.records), 2)
        self.assertIn('outside the 1x2 board', logs.output[0])

    def test_given_random_boards_when_comparing_directions_then_paths_reverse(self):
        for seed in range(8):
            rng = random.Random(seed)
            board = create_board(4, 6, seed=seed)
            for tile in board.tiles:
                if rng.random() < 0.4:
                    tile.mark_matched()
            tiles = list(board.tiles)
            for i, a in enumerate(tiles):
                for b in tiles[i + 1:]:
                    fwd = find_path(board, a, b)
                    back = find_path(board, b, a)
                    self.assertEqual(back, fwd[::-1])
                    self.assertEqual(can_connect(board, a, b), len(fwd) > 0)
                    if fwd:
                        self.assertEqual(fwd[0], a.pos)
                        self.assertEqual(fwd[-1], b.pos)
                        self.assertLessEqual(path_turns(fwd), 2)

    def test_given_random_boards_when_pairs_are_matched_then_connectivity_never_drops(self):
        for seed in range(5):
            board = create_board(4, 4, seed=seed)
            rng = random.Random(seed)
            for _ in range(4):
                before = {
                    (a.id, b.id)
                    for a in board.tiles for b in board.tiles
                    if can_connect(board, a, b)
                }
                # Remove an arbitrary pair by fiat, whether or not it is connectable.
                open_tiles = board.unmatched()
                if len(open_tiles) < 2:
                    break
                victim = rng.choice(open_tiles)
                partner = next(t for t in open_tiles if t is not victim and t.symbol.key == victim.symbol.key)
                victim.mark_matched()
                partner.mark_matched()
                by_id = {t.id: t for t in board.tiles}
                for (ia, ib) in before:
                    a, b = by_id[ia], by_id[ib]
                    if a.matched or b.matched:
                        continue
                    self.assertTrue(can_connect(board, a, b), (seed, a.pos, b.pos))


if __name__ == '__main__':
    unittest.main(verbosity=2)
