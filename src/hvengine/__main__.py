import sys

from hvengine.cli import main

sys.exit(main())
