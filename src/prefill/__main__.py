import sys

from prefill.cli import main

sys.exit(main())
