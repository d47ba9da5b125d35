import sys

from monadlaws.cli import main

sys.exit(main())
