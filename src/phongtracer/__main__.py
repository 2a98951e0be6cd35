# __main__.py
import sys
from phongtracer.main import main

sys.exit(main())
