import sys

from imgbed.cli import main

sys.exit(main())
