from __future__ import annotations

from runner.types import Probe


def percentile(values: list[float], p: float) -> float:
    """Compute the p-th percentile using linear interpolation."""
    if not values:
        return 0.0
    s = sorted(values)
    k = (len(s) - 1) * p
    f = int(k)
    c = min(f + 1, len(s) - 1)
    if f == c:
        return s[f]
    d0 = s[f] * (c - k)
    d1 = s[c] * (k - f)
    return d0 + d1


def summarize(requested: list[str], probes: list[Probe]) -> tuple[dict, int]:
    """Compute summary dict and an exit code from probe results.

    Exit code is 0 only when every requested path came back 200.
    """
    by_path = {p.path: p for p in probes}
    found = [p.path for p in probes if p.status == 200]
    missing = [p.path for p in probes if p.status == 404]
    unexpected = [{"path": p.path, "status": p.status} for p in probes if p.status not in (200, 404)]
    unanswered = [path for path in requested if path not in by_path]
    durations = [p.elapsed_ms for p in probes]

    summary = {
        "component": "runner",
        "event": "summary",
        "requested": len(requested),
        "found_count": len(found),
        "missing": missing,
        "unexpected": unexpected,
        "unanswered": unanswered,
        "timings": {
            "avg_ms": round(sum(durations) / len(durations), 2) if durations else 0.0,
            "p95_ms": round(percentile(durations, 0.95), 2),
            "max_ms": round(max(durations), 2) if durations else 0.0,
        },
    }
    exit_code = 0 if requested and len(found) == len(requested) else 1
    return summary, exit_code
