from __future__ import annotations

import sys
from pathlib import Path

from kungfu import Nothing, Some

_PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(_PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(_PROJECT_ROOT))

from layered import (  # noqa: E402
    DistinctPolicy,
    distinct,
    distinct_with_abort,
    distinct_with_abort_and_log,
)


def banner(title: str) -> None:
    print()
    print("=" * len(title))
    print(title)
    print("=" * len(title))


def main() -> None:
    banner("01_quickstart: distinct over State', Option and OptionalT(Logger)")

    print(distinct([1, 2, 3, 2, 1]))

    for xs in ([1, 2, 3, 2, 1], [1, 2, 3, 2, 1, 101]):
        match distinct_with_abort(xs):
            case Some(kept):
                print(f"kept: {kept}")
            case Nothing():
                print(f"aborted: {xs}")

    policy = DistinctPolicy(threshold=50)
    logged = distinct_with_abort_and_log([1, 2, 3, 2, 6, 106], policy=policy)
    for entry in logged.log:
        print(f"log: {entry}")
    match logged.value:
        case Some(kept):
            print(f"kept: {kept}")
        case Nothing():
            print("aborted, log kept")


if __name__ == "__main__":
    main()
