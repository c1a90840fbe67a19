from concurrent.futures import ThreadPoolExecutor

import pytest
from wordlcrush.engine import compare, reduce_set
from wordlcrush.solver import calculate_guess, worst_case_size
from wordlcrush.solver.selector import _split, score_parallel

ENDINGS = ["bills", "fills", "hills", "kills", "mills"]
POSSIBLE = [
    "crane", "slate", "trace", "crate", "react", "caret", "grace", "brace",
    "plate", "place", "flake", "blame", "shine", "spine", "swine", "whine",
] + ENDINGS
ALLOWED = POSSIBLE + ["fhkmb", "roate", "salet", "adieu", "pling"]


def _brute_worst(guess, candidates):
    return max(len(reduce_set(guess, compare(guess, p), candidates)) for p in candidates)


def _brute_pick(allowed, candidates):
    best, best_word = None, None
    for g in allowed:
        w = _brute_worst(g, candidates)
        if best is None or w < best:
            best, best_word = w, g
    return best_word


# --- shortcut ---
def test_shortcut_below_three_candidates_skips_scoring():
    # an empty allowed list would fail if scoring happened
    assert calculate_guess([], ["slate", "crane"], size_threshold=100) == "slate"
    assert calculate_guess([], ["crane"], size_threshold=100) == "crane"


def test_shortcut_above_threshold_plays_first_candidate():
    assert calculate_guess(ALLOWED, POSSIBLE, size_threshold=len(POSSIBLE) - 1) == POSSIBLE[0]


def test_empty_candidates_is_a_configuration_error():
    with pytest.raises(ValueError):
        calculate_guess(ALLOWED, [], size_threshold=100)


def test_empty_allowed_is_a_configuration_error_when_searching():
    with pytest.raises(ValueError):
        calculate_guess([], ["crane", "slate", "trace"], size_threshold=100)


# --- minimax ---
def test_three_word_scenario_picks_crane():
    words = ["crane", "slate", "trace"]
    assert worst_case_size("crane", words) == 1
    assert calculate_guess(words, words, size_threshold=100) == "crane"


def test_ties_go_to_first_allowed_word():
    cands = ["crane", "slate", "trace"]
    assert calculate_guess(["slate", "crane", "trace"], cands, 100) == "slate"
    assert calculate_guess(["trace", "slate", "crane"], cands, 100) == "trace"


def test_non_candidate_probe_can_win():
    # every candidate guess leaves four look-alikes in the worst case
    assert worst_case_size("bills", ENDINGS) == 4
    assert worst_case_size("fhkmb", ENDINGS) == 1
    assert calculate_guess(ENDINGS + ["fhkmb"], ENDINGS, 100) == "fhkmb"


@pytest.mark.parametrize("guess", ["crane", "fhkmb", "adieu", "hills"])
def test_worst_case_size_matches_brute_force(guess):
    assert worst_case_size(guess, POSSIBLE) == _brute_worst(guess, POSSIBLE)


def test_worst_case_bound_stops_early_but_stays_at_or_above_bound():
    full = worst_case_size("bills", ENDINGS)
    assert worst_case_size("bills", ENDINGS, bound=2) >= 2
    assert worst_case_size("bills", ENDINGS, bound=full + 1) == full


def test_calculate_guess_matches_brute_force():
    assert calculate_guess(ALLOWED, POSSIBLE, 100) == _brute_pick(ALLOWED, POSSIBLE)


# --- parallel scoring ---
def test_split_covers_allowed_in_order():
    parts = _split(ALLOWED, 7)
    assert [w for _, chunk in parts for w in chunk] == ALLOWED
    assert all(ALLOWED[off] == chunk[0] for off, chunk in parts)


@pytest.mark.parametrize("workers", [2, 3, 8])
def test_parallel_matches_sequential_with_thread_pool(workers):
    seq = calculate_guess(ALLOWED, POSSIBLE, 100, workers=1)
    with ThreadPoolExecutor(max_workers=workers) as ex:
        par = calculate_guess(ALLOWED, POSSIBLE, 100, workers=workers, executor=ex)
    assert par == seq


def test_parallel_tie_break_is_lowest_index():
    cands = ["crane", "slate", "trace"]
    allowed = ["slate", "crane", "trace"]
    with ThreadPoolExecutor(max_workers=3) as ex:
        score, index, word = score_parallel(allowed, cands, workers=3, executor=ex)
    assert (score, index, word) == (1, 0, "slate")


def test_parallel_matches_sequential_with_process_pool():
    seq = calculate_guess(ALLOWED, POSSIBLE, 100, workers=1)
    assert calculate_guess(ALLOWED, POSSIBLE, 100, workers=2) == seq
