# -*- coding: utf-8 -*-

#  Copyright (©) Meteo-France (2020-)
#
#  This software is a computer program whose purpose is to provide
#   a small demonstration of the observer design pattern.
#
#  This software is governed by the CeCILL-C license under French law and
#  abiding by the rules of distribution of free software.  You can  use,
#  modify and/ or redistribute the software under the terms of the CeCILL-C
#  license as circulated by CEA, CNRS and INRIA at the following URL
#  "http://www.cecill.info".
#
#  As a counterpart to the access to the source code and  rights to copy,
#  modify and redistribute granted by the license, users are provided only
#  with a limited warranty  and the software's author,  the holder of the
#  economic rights,  and the successive licensors  have only  limited
#  liability.
#
#  In this respect, the user's attention is drawn to the risks associated
#  with loading,  using,  modifying and/or developing or reproducing the
#  software by the user in light of its specific status of free software,
#  that may mean  that it is complicated to manipulate,  and  that  also
#  therefore means  that it is reserved for developers  and  experienced
#  professionals having in-depth computer knowledge. Users are therefore
#  encouraged to load and test the software's suitability as regards their
#  requirements in conditions enabling the security of their systems and/or
#  data to be ensured and,  more generally, to use and operate it in the
#  same conditions as regards security.
#
#  The fact that you are presently reading this means that you have had
#  knowledge of the CeCILL-C license and that you accept its terms.

"""
The ``observerdemo`` package is a small demonstration of the Observer design
pattern. See the ``observerdemo_demo.py`` and ``observerdemo_tui.py``
executables.

Here are a few pointers for a better understanding of the code:

* :mod:`observerdemo.observer` provides the abstract :class:`Observer` and
  :class:`StateReader` interfaces and the :class:`Subject` class that holds
  some state and notifies the attached observers each time it changes.
* :mod:`observerdemo.observers` provides two concrete observers that react
  (or not) depending on the subject's state.
* :mod:`observerdemo.scenario` wires a subject and two observers together
  and plays the fixed demonstration scenario.
* :mod:`observerdemo.conf` is an utility module that is used to handle the
  configuration data.
* :mod:`observerdemo.ui` provides an interactive, ``urwid`` based, text
  user interface.

"""

__all__ = ["Subject", "Observer", "StateReader", "ObserverDemoApplication"]

__version__ = "0.1.0"

from .observer import Observer, StateReader, Subject
from .ui import ObserverDemoApplication
