#!/usr/bin/env python3

from .errors import *
from .document import *
from .loader import *
from .config import *
from .utils import *
