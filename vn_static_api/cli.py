"""CLI for vn-static-api."""

import argparse
import os
import sys
import time

from vn_static_api.domain.constants import (
    DATA_URL,
    DEVELOPERS_BASE_PATH,
    ENV_DATA_URL,
    ENV_OUTPUT_DIR,
    ENV_PAGE_SIZE,
    FETCH_TIMEOUT_SECONDS,
    OUTPUT_DIR,
    PAGE_SIZE,
    POSTS_BASE_PATH,
)
from vn_static_api.domain.models import FileCounter, GenerationResult, SiteOptions
from vn_static_api.fetcher import DataSource, FetchError, LocalDataSource, RemoteDataSource
from vn_static_api.output.collection_generator import CollectionGenerator
from vn_static_api.output.json_writer import JSONWriter, WriteError
from vn_static_api.output.mappers import (
    DEVELOPER_EXTRACTOR,
    map_developer_detail,
    map_developer_page,
    map_post_detail,
    map_post_page,
    post_link,
)
from vn_static_api.output.search_index_builder import SearchIndexBuilder


def _build_source(options: SiteOptions) -> DataSource:
    if options.source_file:
        return LocalDataSource(options.source_file)
    return RemoteDataSource(options.data_url, timeout=options.timeout)


def generate_site(
    options: SiteOptions,
    counter: FileCounter | None = None,
    source: DataSource | None = None,
) -> GenerationResult:
    """Main orchestration: fetch -> posts -> search index -> developers.

    The counter is owned by the caller so the number of files written is
    still known when a FetchError or WriteError propagates.
    """
    start_time = time.time()
    counter = counter if counter is not None else FileCounter()
    source = source or _build_source(options)

    records = source.fetch()
    if not records:
        print("Warning: No data found. Exiting.", file=sys.stderr)
        return GenerationResult(
            records=0,
            developers=0,
            files_generated=counter.total,
            output_dir=options.output_dir,
            skipped=True,
        )

    writer = JSONWriter(options.output_dir, pretty=options.pretty)
    generator = CollectionGenerator(writer, counter)

    print(f"Generating {len(records)} posts under {POSTS_BASE_PATH}...")
    generator.generate(records, options.page_size, POSTS_BASE_PATH, map_post_detail, map_post_page)

    if options.include_search_index:
        search_builder = SearchIndexBuilder()
        search_index = search_builder.build(records)
        search_builder.write_all(search_index, writer, counter, POSTS_BASE_PATH)

    developers = DEVELOPER_EXTRACTOR.extract(records, post_link)
    if developers:
        print(f"Generating {len(developers)} developer pages under {DEVELOPERS_BASE_PATH}...")
        generator.generate(
            developers, options.page_size, DEVELOPERS_BASE_PATH,
            map_developer_detail, map_developer_page,
        )
    else:
        print("No developers found to generate related entities.")

    return GenerationResult(
        records=len(records),
        developers=len(developers),
        files_generated=counter.total,
        output_dir=options.output_dir,
        duration_seconds=round(time.time() - start_time, 2),
    )


def _positive_int(value: str) -> int:
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid integer: {value!r}")
    if number <= 0:
        raise argparse.ArgumentTypeError(f"must be a positive integer, got {number}")
    return number


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='vn-static-api',
        description='Generate a static, paginated JSON API from a visual-novel dataset',
    )
    parser.add_argument('--url', default=os.environ.get(ENV_DATA_URL, DATA_URL),
                        help=f'Source dataset URL (env {ENV_DATA_URL})')
    parser.add_argument('--source-file', help='Read the dataset from a local JSON file instead of the URL')
    parser.add_argument('--output', default=os.environ.get(ENV_OUTPUT_DIR, OUTPUT_DIR),
                        help=f'Output directory (env {ENV_OUTPUT_DIR}, default: {OUTPUT_DIR})')
    parser.add_argument('--page-size', type=_positive_int,
                        default=os.environ.get(ENV_PAGE_SIZE, str(PAGE_SIZE)),
                        help=f'Items per index page (env {ENV_PAGE_SIZE}, default: {PAGE_SIZE})')
    parser.add_argument('--timeout', type=float, default=FETCH_TIMEOUT_SECONDS,
                        help=f'Fetch timeout in seconds (default: {FETCH_TIMEOUT_SECONDS})')
    parser.add_argument('--no-pretty', action='store_true', help='Disable pretty printing')
    parser.add_argument('--no-search-index', action='store_true', help='Skip the posts search index')
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    options = SiteOptions(
        data_url=args.url,
        source_file=args.source_file,
        output_dir=args.output,
        page_size=args.page_size,
        timeout=args.timeout,
        pretty=not args.no_pretty,
        include_search_index=not args.no_search_index,
    )

    counter = FileCounter()
    try:
        result = generate_site(options, counter=counter)
    except (FetchError, WriteError) as e:
        print(f"Error: {e}", file=sys.stderr)
        print(f"Generated {counter.total} files in total.")
        return 1

    print(f"Generated {result.files_generated} files in total.")
    if not result.skipped:
        print(f"File generation time: {result.duration_seconds}s")
        print(f"Output: {result.output_dir}")
    return 0


if __name__ == '__main__':
    sys.exit(main())
