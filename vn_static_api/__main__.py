import sys

from vn_static_api.cli import main

sys.exit(main())
