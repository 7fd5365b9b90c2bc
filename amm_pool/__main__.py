import sys

from amm_pool.cli import main

sys.exit(main())
