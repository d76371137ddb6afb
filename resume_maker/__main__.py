import sys

from resume_maker.cli import main

sys.exit(main())
