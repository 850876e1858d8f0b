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
The fixed demonstration scenario: one subject, two observers, three
state changes.
"""

import logging
import random

from .conf import ObserverDemoConfig
from .observer import Observer, Subject

__all__ = ["build_subject", "run_scenario"]

logger = logging.getLogger(__name__)


def build_subject(conf: ObserverDemoConfig) -> Subject:
    """Create a :class:`Subject` object given the **conf** settings."""
    logger.debug(
        "Building the subject: delay=%s range=%s seed=%s",
        conf.processing_delay,
        conf.state_range,
        conf.seed,
    )
    return Subject(
        processing_delay=conf.processing_delay,
        state_range=conf.state_range,
        rng=random.Random(conf.seed),
    )


def run_scenario(subject: Subject, observer_a: Observer, observer_b: Observer):
    """Attach both observers, change the state twice, detach **observer_b**
    and change the state once more."""
    subject.attach(observer_a)
    subject.attach(observer_b)

    subject.run_business_logic()
    subject.run_business_logic()

    subject.detach(observer_b)

    subject.run_business_logic()
