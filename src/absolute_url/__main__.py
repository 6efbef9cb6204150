import sys

from absolute_url.cli import main

sys.exit(main())
