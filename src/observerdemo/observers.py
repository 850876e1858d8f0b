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
Concrete observers: they react to the updates issued by the subject they
have been attached to.
"""

import abc
import logging

from .observer import Observer, StateReader

__all__ = ["ConcreteObserverA", "ConcreteObserverB"]

logger = logging.getLogger(__name__)


class _LoggingObserver(Observer):
    """Log a message whenever the subject's state satisfies :meth:`reacts`."""

    #: The name used in log messages
    label = None

    @abc.abstractmethod
    def reacts(self, state: int) -> bool:
        """Is **state** worth a reaction?"""
        pass

    def on_update(self, subject: StateReader):
        """Log something if the **subject** state is interesting."""
        if self.reacts(subject.state):
            logger.info("%s: Reacted to the event.", self.label)
        else:
            logger.debug("%s: Ignored state %d.", self.label, subject.state)

    def __repr__(self):
        return "<{:s} at {:#x}>".format(self.__class__.__name__, id(self))


class ConcreteObserverA(_LoggingObserver):
    """Reacts to small states (< 3)."""

    label = "ConcreteObserverA"

    def reacts(self, state: int) -> bool:
        return state < 3


class ConcreteObserverB(_LoggingObserver):
    """Reacts to 0 and to any state >= 2."""

    label = "ConcreteObserverB"

    def reacts(self, state: int) -> bool:
        return state == 0 or state >= 2
