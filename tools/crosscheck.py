import random
import time
import sys
sys.path.append('.')
import game  # type: ignore


def check_board(board) -> int:
    """Returns the number of property violations found on one board."""
    problems = 0
    tiles = list(board.tiles)
    for i, a in enumerate(tiles):
        for b in tiles[i + 1:]:
            fwd = game.find_path(board, a, b)
            back = game.find_path(board, b, a)
            if fwd != back[::-1]:
                print(f"  asymmetric {a.pos}->{b.pos}: {fwd} vs {back}")
                problems += 1
            if game.can_connect(board, a, b) != bool(fwd):
                print(f"  can_connect disagrees for {a.pos}->{b.pos}")
                problems += 1
            if fwd and (fwd[0] != a.pos or fwd[-1] != b.pos or len(fwd) > 4):
                print(f"  malformed path {fwd}")
                problems += 1
    return problems


def main():
    random.seed(0)
    total = 20
    mismatches = 0
    for _ in range(total):
        seed = random.randrange(1_000_000)
        rows = random.choice([2, 3, 4, 6])
        cols = random.choice([2, 4, 5, 8])
        board = game.create_board(rows, cols, seed=seed)
        t0 = time.time()
        before = {(a.pos, b.pos) for a in board.tiles for b in board.tiles if game.can_connect(board, a, b)}
        # Clear a few random pairs and make sure nothing that was connectable stops being so.
        for _ in range(rows * cols // 4):
            hint = game.find_hint(board)
            if hint is None:
                break
            game.commit_match(board, hint[0], hint[1])
        after = {(a.pos, b.pos) for a in board.tiles for b in board.tiles if game.can_connect(board, a, b)}
        lost = {p for p in before if p not in after and not board.at(*p[0]).matched and not board.at(*p[1]).matched}
        problems = check_board(board) + len(lost)
        took = int((time.time() - t0) * 1000)
        print(f"seed={seed} {rows}x{cols} problems={problems} ({took}ms)")
        if problems:
            mismatches += 1
    print(f"Checked {total} boards, boards with problems={mismatches}")


if __name__ == '__main__':
    main()
