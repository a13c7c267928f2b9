import sys

from dream_world.cli import main

sys.exit(main())
