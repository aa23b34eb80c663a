import sys

from knight_tour.cli import main

sys.exit(main())
