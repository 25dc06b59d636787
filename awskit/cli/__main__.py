"""Allow ``python -m awskit.cli`` execution."""

import sys

from awskit.cli.commands import main

sys.exit(main())
