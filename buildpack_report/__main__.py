import sys

from buildpack_report.main import main

sys.exit(main())
