import sys

from orbit_canvas.app import main

sys.exit(main())
