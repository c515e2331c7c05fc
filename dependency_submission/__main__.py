import sys

from dependency_submission.cli import main

sys.exit(main())
