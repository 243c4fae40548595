import sys
from ntnotes.cli import main

sys.exit(main())
