import sys

from heatmap.main import main

sys.exit(main())
