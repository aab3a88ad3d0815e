import sys

from gtc.cli.main import main

sys.exit(main())
