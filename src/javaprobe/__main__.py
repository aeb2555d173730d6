import sys

from javaprobe.cli import main

sys.exit(main())
