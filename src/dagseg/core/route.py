"""Maximum log-probability path through a segmentation DAG."""

from .dag import DAG
from .dictionary import Dictionary
from .models import RouteStep


def compute_route(dictionary: Dictionary, sentence: str, dag: DAG) -> list[RouteStep]:
    """Compute the best path from every offset to the end of ``sentence``.

    ``route[idx]`` holds the highest achievable sum of log-probabilities
    from ``idx`` onward and the end offset of the first word on that path.
    ``route[len(sentence)]`` is the base case ``RouteStep(0.0, None)``.

    Candidate ends are tried in ascending order and only a strictly better
    score replaces the current best, so ties go to the shorter word.
    """
    n = len(sentence)
    route: list[RouteStep] = [RouteStep(0.0, None)] * (n + 1)

    for idx in range(n - 1, -1, -1):
        best: RouteStep | None = None
        for x in dag[idx]:
            score = dictionary.log_freq(sentence[idx : x + 1]) + route[x + 1].score
            if best is None or score > best.score:
                best = RouteStep(score, x)
        route[idx] = best

    return route


def best_spans(route: list[RouteStep]) -> list[tuple[int, int]]:
    """Walk a route forward from offset 0 as ``(start, stop)`` spans."""
    spans: list[tuple[int, int]] = []
    x = 0
    n = len(route) - 1
    while x < n:
        y = route[x].end + 1
        spans.append((x, y))
        x = y
    return spans
