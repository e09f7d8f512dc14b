# -*- coding: utf-8 -*-
# flake8: noqa
from .regions import *
