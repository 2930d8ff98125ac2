"""Allow running git-branch-is with ``python -m git_branch_is``."""

import sys

from git_branch_is.cli.main import main

sys.exit(main())
