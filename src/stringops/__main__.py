import sys
from stringops.demo import main

sys.exit(main())
