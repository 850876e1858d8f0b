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
A very crude implementation of the observer design pattern.

A :class:`Subject` holds some state and an ordered list of :class:`Observer`
objects. Observers are typed against the :class:`StateReader` interface only:
they are meant to look at the state, but the object they receive is the
:class:`Subject` itself (nothing prevents them from calling its methods).
"""

from __future__ import annotations

import abc
import logging
import math
import random
import time
import typing

__all__ = ["StateReader", "Observer", "Subject"]

logger = logging.getLogger(__name__)


class StateReader(metaclass=abc.ABCMeta):
    """Read-only access to the state of an observable object."""

    @property
    @abc.abstractmethod
    def state(self) -> int:
        """The current state."""
        pass


class Observer(metaclass=abc.ABCMeta):
    """Abstract class for any observer class.

    Any object with a callable ``on_update`` attribute is considered an
    :class:`Observer` by :func:`isinstance`, even if it does not inherit from
    this class.
    """

    @abc.abstractmethod
    def on_update(self, subject: StateReader):
        """React to a state change of the **subject** object."""
        pass

    @classmethod
    def __subclasshook__(cls, subclass):
        if cls is Observer:
            if callable(getattr(subclass, "on_update", None)):
                return True
        return NotImplemented


class Subject(StateReader):
    """The object that owns the state and notifies its observers."""

    def __init__(
        self,
        processing_delay: float = 0.015,
        state_range: typing.Tuple[int, int] = (0, 10),
        rng: random.Random = None,
    ):
        """
        :param processing_delay: How long (in seconds) the business logic
                                 pretends to be busy
        :param state_range: New states are picked in
                            ``range(state_range[0], state_range[1])``
        :param rng: Any object with a ``randrange`` method (a new
                    :class:`random.Random` object by default)
        """
        if not math.isfinite(processing_delay) or processing_delay < 0:
            raise ValueError(
                "processing_delay must be a finite number >= 0 (got {!r})".format(
                    processing_delay
                )
            )
        if state_range[0] >= state_range[1]:
            raise ValueError("Empty state_range: {!r}".format(state_range))
        self._state = 0
        self._observers = list()
        self._processing_delay = processing_delay
        self._state_range = tuple(state_range)
        self._rng = random.Random() if rng is None else rng

    @property
    def state(self) -> int:
        """The current state (initially 0)."""
        return self._state

    @property
    def observers(self) -> typing.Tuple[Observer, ...]:
        """The attached observers, in registration order."""
        return tuple(self._observers)

    @property
    def processing_delay(self) -> float:
        return self._processing_delay

    @property
    def state_range(self) -> typing.Tuple[int, int]:
        return self._state_range

    def attach(self, observer: Observer):
        """Attach a new :class:`Observer` object to this subject.

        The same observer may be attached several times: it will then be
        notified several times.
        """
        if not isinstance(observer, Observer):
            raise TypeError("{!r} is not an Observer".format(observer))
        logger.info("Subject: Attached an observer.")
        self._observers.append(observer)

    def detach(self, observer: Observer):
        """Remove the first occurrence of **observer** from the observers list.

        The observers list is left unchanged if **observer** is not attached.
        The detachment is logged in any case.
        """
        try:
            self._observers.remove(observer)
        except ValueError:
            logger.debug("Subject: %r is not attached. Ignoring.", observer)
        logger.info("Subject: Detached an observer.")

    def iter_notify(self) -> typing.Iterator[Observer]:
        """Notify the attached observers one at a time.

        Each observer is called when the iteration reaches it and is then
        yielded. Attaching or detaching observers while iterating is not
        supported.
        """
        for observer in self._observers:
            observer.on_update(self)
            yield observer

    def notify(self):
        """Notify all of the attached :class:`Observer` objects."""
        logger.info("Subject: Notifying observers...")
        for _ in self.iter_notify():
            pass

    def run_business_logic(self):
        """Change the state and notify the observers.

        Usually, the subscription logic is only a fraction of what a subject
        can really do. Here, the state is just set to a random value.
        """
        logger.info("Subject: I'm doing something important.")
        self._state = self._rng.randrange(*self._state_range)
        time.sleep(self._processing_delay)
        logger.info("Subject: My state has just changed to: %d", self._state)
        self.notify()
