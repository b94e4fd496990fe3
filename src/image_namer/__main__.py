import sys

from image_namer.cli import main

sys.exit(main())
