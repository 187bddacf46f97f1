from __future__ import annotations

import argparse
import sys

from index_meta.description import IndexDescription


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="index-describe",
        description="Assemble an index description from flags and print it",
    )
    parser.add_argument(
        "--distance-type",
        default=None,
        help="Distance metric of a vector index (l2/cosine/dot)",
    )
    parser.add_argument(
        "--index-type",
        default=None,
        help="Index algorithm (IVF_PQ/BTREE/BITMAP/HNSW)",
    )
    parser.add_argument(
        "--num-indexed-rows",
        type=int,
        default=None,
        help="Rows covered by the index",
    )
    parser.add_argument(
        "--num-unindexed-rows",
        type=int,
        default=None,
        help="Rows not yet covered by the index",
    )
    return parser


def main(argv: list[str] | None = None) -> None:
    parser = _build_parser()
    args = parser.parse_args(argv)

    try:
        description = (
            IndexDescription.builder()
            .distance_type(args.distance_type)
            .index_type(args.index_type)
            .num_indexed_rows(args.num_indexed_rows)
            .num_unindexed_rows(args.num_unindexed_rows)
            .build()
        )
    except Exception as exc:
        print(f"[index-describe] failed: {exc}", file=sys.stderr, flush=True)
        raise SystemExit(1) from exc

    print(f"[index-describe] {description!r}", flush=True)


if __name__ == "__main__":
    main()
