import sys

from fmod_headers.cli import main

sys.exit(main())
