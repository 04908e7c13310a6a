"""Shared constants: data source, output layout, and search index defaults.

Centralizes the values shared by the fetcher, the generators, and the CLI.
"""

# ── Data Source ──────────────────────────────────────────────────────────

DATA_URL = 'https://raw.githubusercontent.com/YuushaExa/testapi/refs/heads/main/merged.json'
USER_AGENT = 'vn-static-api/1.0'
FETCH_TIMEOUT_SECONDS = 30.0

# ── Output Layout ────────────────────────────────────────────────────────

OUTPUT_DIR = './public'
PAGE_SIZE = 10

POSTS_BASE_PATH = 'vn/posts'
DEVELOPERS_BASE_PATH = 'vn/developers'

INDEX_FILENAME = 'index.json'
PAGE_DIRNAME = 'page'

# Number of example paths printed per generated-file category
SAMPLE_LOG_LINES = 3

# ── Search Index ─────────────────────────────────────────────────────────

SEARCH_INDEX_DIRNAME = 'search-index'
SEARCH_FIELDS: tuple[str, ...] = ('title', 'description')
SEARCH_MIN_WORD_LENGTH = 2
SEARCH_PREFIX_LENGTH = 2

# ── Environment Overrides ────────────────────────────────────────────────

ENV_DATA_URL = 'VN_DATA_URL'
ENV_OUTPUT_DIR = 'VN_OUTPUT_DIR'
ENV_PAGE_SIZE = 'VN_PAGE_SIZE'
