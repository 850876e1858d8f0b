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
This is an interactive text-based demonstration of the observer design
pattern.

Two observers can be attached to, or detached from, a subject. Each time the
subject's state changes, the reactions of the attached observers are
displayed.
"""

import argparse
import collections
import os
import sys

from observerdemo import ObserverDemoApplication
from observerdemo.conf import observerdemo_conf
from observerdemo.observers import ConcreteObserverA, ConcreteObserverB
from observerdemo.scenario import build_subject

EPILOG_STR = """
Note: The subject's behaviour can be tuned in the user-wide configuration
      file (~/.observerdemorc.ini). For instance:

      [subject]
      processing_delay=0.5
      state_min=0
      state_max=5
      seed=42
"""


def main():
    """Start the text-based user interface"""

    # Log messages are displayed by the UI itself
    observerdemo_conf.logging_config(console=False)

    # Process the command-line arguments
    program_name = os.path.basename(sys.argv[0])
    program_short_desc = program_name + " -- " + __doc__.lstrip("\n")
    # noinspection PyTypeChecker
    parser = argparse.ArgumentParser(
        description=program_short_desc,
        epilog=EPILOG_STR,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.parse_args()

    subject = build_subject(observerdemo_conf)
    observers = collections.OrderedDict(
        [
            ("Observer A", ConcreteObserverA()),
            ("Observer B", ConcreteObserverB()),
        ]
    )
    app = ObserverDemoApplication(subject, observers)
    app.main()
