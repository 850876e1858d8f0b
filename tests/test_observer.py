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
Test the Subject class and the Observer interface.
"""

import unittest

from observerdemo.observer import Observer, StateReader, Subject


class FakeRandom(object):
    """Return pre-defined values (and record the requested ranges)."""

    def __init__(self, *values):
        self._values = list(values)
        self.requests = list()

    def randrange(self, start, stop):
        self.requests.append((start, stop))
        return self._values.pop(0)


class JournalObserver(Observer):
    """Record each notification in a shared journal."""

    def __init__(self, name, journal):
        self.name = name
        self.journal = journal

    def on_update(self, subject: StateReader):
        self.journal.append((self.name, subject.state))


class DuckObserver(object):
    """Not an Observer subclass, but it quacks like one."""

    def __init__(self):
        self.states = list()

    def on_update(self, subject):
        self.states.append(subject.state)


class TestSubject(unittest.TestCase):
    """Unit-test class for Subject."""

    def setUp(self):
        self.journal = list()
        self.o_1 = JournalObserver("o1", self.journal)
        self.o_2 = JournalObserver("o2", self.journal)
        self.o_3 = JournalObserver("o3", self.journal)

    def test_initial_state(self):
        subject = Subject()
        self.assertEqual(subject.state, 0)
        self.assertEqual(subject.observers, ())
        self.assertIsInstance(subject, StateReader)
        self.assertEqual(subject.processing_delay, 0.015)
        self.assertEqual(subject.state_range, (0, 10))
        with self.assertRaises(AttributeError):
            subject.state = 1

    def test_bad_arguments(self):
        with self.assertRaises(ValueError):
            Subject(processing_delay=-1)
        with self.assertRaises(ValueError):
            Subject(processing_delay=float("nan"))
        with self.assertRaises(ValueError):
            Subject(processing_delay=float("inf"))
        with self.assertRaises(ValueError):
            Subject(state_range=(5, 5))
        with self.assertRaises(ValueError):
            Subject(state_range=(5, 2))

    def test_notify_order(self):
        """Observers are notified once each, in registration order."""
        subject = Subject()
        for obs in (self.o_2, self.o_1, self.o_3):
            subject.attach(obs)
        self.assertEqual(subject.observers, (self.o_2, self.o_1, self.o_3))
        subject.notify()
        self.assertListEqual(self.journal, [("o2", 0), ("o1", 0), ("o3", 0)])

    def test_duplicates(self):
        subject = Subject()
        subject.attach(self.o_1)
        subject.attach(self.o_1)
        subject.notify()
        self.assertListEqual(self.journal, [("o1", 0), ("o1", 0)])
        # Only the first occurrence is removed
        subject.attach(self.o_2)
        subject.detach(self.o_1)
        self.assertEqual(subject.observers, (self.o_1, self.o_2))

    def test_detach(self):
        subject = Subject()
        subject.attach(self.o_1)
        subject.attach(self.o_2)
        subject.attach(self.o_3)
        with self.assertLogs("observerdemo.observer", level="INFO") as cm:
            subject.detach(self.o_2)
        self.assertEqual(
            cm.output, ["INFO:observerdemo.observer:Subject: Detached an observer."]
        )
        subject.notify()
        self.assertListEqual(self.journal, [("o1", 0), ("o3", 0)])

    def test_detach_missing(self):
        """Detaching a never attached observer leaves the list unchanged."""
        subject = Subject()
        subject.attach(self.o_1)
        with self.assertLogs("observerdemo.observer", level="DEBUG") as cm:
            subject.detach(self.o_2)
        self.assertEqual(len(cm.records), 2)
        self.assertEqual(cm.records[0].levelname, "DEBUG")
        self.assertIn("is not attached", cm.output[0])
        # The detachment is reported anyway
        self.assertEqual(
            cm.output[1], "INFO:observerdemo.observer:Subject: Detached an observer."
        )
        self.assertEqual(subject.observers, (self.o_1,))
        # Detaching twice is fine too
        subject.detach(self.o_1)
        subject.detach(self.o_1)
        self.assertEqual(subject.observers, ())

    def test_attach(self):
        subject = Subject()
        with self.assertLogs("observerdemo.observer", level="INFO") as cm:
            subject.attach(self.o_1)
        self.assertEqual(
            cm.output, ["INFO:observerdemo.observer:Subject: Attached an observer."]
        )
        with self.assertRaises(TypeError):
            subject.attach("not an observer")
        with self.assertRaises(TypeError):
            subject.attach(subject)
        self.assertEqual(subject.observers, (self.o_1,))

    def test_duck_typed_observer(self):
        duck = DuckObserver()
        self.assertIsInstance(duck, Observer)
        subject = Subject(processing_delay=0, rng=FakeRandom(6))
        subject.attach(duck)
        subject.run_business_logic()
        self.assertListEqual(duck.states, [6])

    def test_iter_notify_is_lazy(self):
        subject = Subject()
        subject.attach(self.o_1)
        subject.attach(self.o_2)
        notifier = subject.iter_notify()
        self.assertListEqual(self.journal, [])
        self.assertIs(next(notifier), self.o_1)
        self.assertListEqual(self.journal, [("o1", 0)])
        self.assertIs(next(notifier), self.o_2)
        self.assertListEqual(self.journal, [("o1", 0), ("o2", 0)])
        with self.assertRaises(StopIteration):
            next(notifier)

    def test_shared_observer(self):
        """The same observer may watch several subjects."""
        s_1 = Subject(processing_delay=0, rng=FakeRandom(1))
        s_2 = Subject(processing_delay=0, rng=FakeRandom(8))
        s_1.attach(self.o_1)
        s_2.attach(self.o_1)
        s_1.run_business_logic()
        s_2.run_business_logic()
        self.assertListEqual(self.journal, [("o1", 1), ("o1", 8)])

    def test_run_business_logic(self):
        rng = FakeRandom(7, 3)
        subject = Subject(processing_delay=0, rng=rng)
        subject.attach(self.o_1)
        subject.attach(self.o_2)
        with self.assertLogs("observerdemo.observer", level="INFO") as cm:
            subject.run_business_logic()
        self.assertEqual(subject.state, 7)
        self.assertListEqual(
            [r.getMessage() for r in cm.records],
            [
                "Subject: I'm doing something important.",
                "Subject: My state has just changed to: 7",
                "Subject: Notifying observers...",
            ],
        )
        subject.detach(self.o_1)
        subject.run_business_logic()
        self.assertEqual(subject.state, 3)
        self.assertListEqual(self.journal, [("o1", 7), ("o2", 7), ("o2", 3)])
        self.assertListEqual(rng.requests, [(0, 10), (0, 10)])

    def test_random_states(self):
        subject = Subject(processing_delay=0, state_range=(2, 5))
        for _ in range(50):
            subject.run_business_logic()
            self.assertIn(subject.state, range(2, 5))


if __name__ == "__main__":
    unittest.main()
