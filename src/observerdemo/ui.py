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
All the necessary `urwid`` based classes needed to build the interactive
user interface.

Here are a few pointers:

* A :class:`ObserverDemoApplication` manages the whole application UI. A call
  to its ``main`` method starts the Urwid main loop (and therefore actually
  starts the UI).
* The :class:`ObserverDemoApplication` object builds a
  :class:`ObserverDemoMainView` object and displays it. The main view is
  itself an observer of the subject: each notification refreshes the state
  displayed in the header.
* Log records emitted while the UI is running are displayed in the main view
  thanks to an :class:`UrwidListHandler` logging handler.

"""

from __future__ import annotations

import abc
import logging
import typing

import urwid
import urwid.display.curses
import urwid.display.raw

from .conf import observerdemo_conf
from .observer import Observer, StateReader, Subject

__all__ = ["ObserverDemoApplication", "UrwidListHandler"]

logger = logging.getLogger(__name__)


class UrwidListHandler(logging.Handler):
    """A logging handler that appends formatted records to an urwid walker."""

    def __init__(
        self,
        walker: urwid.SimpleListWalker,
        max_lines: int = 500,
        level: int = logging.NOTSET,
    ):
        """
        :param walker: The list walker where text widgets are added
        :param max_lines: Older lines are discarded beyond this limit
        """
        super().__init__(level)
        self._walker = walker
        self._max_lines = max_lines
        self.setFormatter(logging.Formatter("%(message)s"))

    def emit(self, record: logging.LogRecord):
        try:
            msg = self.format(record)
        except Exception:  # See logging.StreamHandler.emit
            self.handleError(record)
            return
        self._walker.append(urwid.AttrMap(urwid.Text(msg), "log"))
        if len(self._walker) > self._max_lines:
            del self._walker[: len(self._walker) - self._max_lines]
        self._walker.set_focus(len(self._walker) - 1)


class KeyCaptureWrapper(urwid.WidgetWrap):
    """Capture key strokes and call the current view ``keypress_hook`` callback on them."""

    def __init__(self, w: urwid.Widget, current_view: ObserverDemoAbstractView):
        """
        :param w: The wrapped widget
        :param current_view:  The current view object (that must have a
                              ``keypress_hook`` callback)
        """
        self._current_view = current_view
        super().__init__(w)

    def selectable(self) -> bool:
        """Must be selectable to capture key strokes."""
        return True

    def keypress(self, size: typing.Tuple[int], key: str) -> typing.Union[str, None]:
        """Divert key strokes to the ``keypress_hook`` method."""
        key = self._current_view.keypress_hook(key)
        if key and hasattr(self._w, "keypress"):
            return self._w.keypress(size, key)
        else:
            return key


# ------ Views are custom object that handle a given layout of the UI ------


class ObserverDemoAbstractView(metaclass=abc.ABCMeta):
    """Any observerdemo views must inherit from this class"""

    footer_add_quit = True
    footer_text = []

    def __init__(self, subject: Subject, app_object: ObserverDemoApplication):
        """
        Any view must have ``header``, ``footer`` and ``main_content`` attribute.
        They will be used to build a Frame widget.

        :param subject: The :class:`Subject` object currently being used
        :param app_object: The application object
        """
        super().__init__()
        self.subject = subject
        self.app = app_object
        self.header = urwid.Text("")
        self.header_update()
        self.footer = None
        self.footer_update()
        self.main_content = None

    def switch_in_hook(self):
        """Called each time this view is shown."""
        pass

    def switch_out_hook(self):
        """Called each time this view is hidden."""
        pass

    def header_update(self):
        """Update the header text."""
        self.header.set_text(
            "Observer demo. Subject state: {:d}".format(self.subject.state)
        )

    def footer_update(self, *extras: list):
        """Update the footer text given a list of command extended by **extras**."""
        txt_pile = []
        for extra in extras:
            txt_pile.append(urwid.Text(extra))
        for extra in self.footer_text:
            txt_pile.append(urwid.Text(extra))
        if self.footer_add_quit:
            txt_pile.append(urwid.Text([("key", "Q"), ": Quit"]))
        max_len = max([len(t.text) for t in txt_pile]) if txt_pile else 1
        if self.footer is None:
            self.footer = urwid.GridFlow(
                txt_pile, max_len, h_sep=1, v_sep=0, align="left"
            )
        else:
            self.footer.contents = [(t, self.footer.options()) for t in txt_pile]
            self.footer.cell_width = max_len

    def keypress_hook(self, key: str) -> typing.Union[str, None]:
        """Leveraged when used with a :class:`KeyCaptureWrapper` wrapper."""
        return key


class ObserverDemoQuitView(ObserverDemoAbstractView):
    """The view that is triggered when the user wants to quit the application."""

    def __init__(self, subject: Subject, app_object: ObserverDemoApplication):
        """
        :param subject: The subject currently being used
        :param app_object: The application object
        """
        super().__init__(subject, app_object)
        # the frame that will display the message and buttons
        frame = urwid.Frame(urwid.Filler(urwid.Divider(), "top"), focus_part="footer")
        frame.header = urwid.Pile(
            [urwid.Text("Are you sure you want to quit?"), urwid.Divider()]
        )
        # pad area around the frame
        w = urwid.Padding(frame, ("fixed left", 2), ("fixed right", 2))
        w = urwid.Filler(w, ("fixed top", 1), ("fixed bottom", 1))
        w = urwid.Padding(w, "center", 25)
        w = urwid.Filler(w, "middle", 6)
        self.main_content = w
        # Add the Yes/No buttons
        self._inner_g_flow = urwid.GridFlow(
            [
                urwid.AttrMap(
                    urwid.Button(name, self.button_press), "button", "button_f"
                )
                for name in ("Yes", "No")
            ],
            cell_width=7,
            h_sep=3,
            v_sep=1,
            align="center",
        )
        frame.footer = urwid.Pile([urwid.Divider(), self._inner_g_flow], focus_item=1)
        # Where to go back if the user answers No ?
        self.previous_view = None

    def switch_in_hook(self):
        """Record the previous view and focus the Yes answer."""
        self.previous_view = self.app.current_view
        self._inner_g_flow.focus_position = 0

    def switch_out_hook(self):
        """Forget about the previous view."""
        self.previous_view = None

    def button_press(self, button: urwid.Button):
        """Exit or go back to the previous view."""
        if button.label == "Yes":
            raise urwid.ExitMainLoop
        else:
            self.app.switch_view(self.previous_view)

    def footer_update(self, *extras: list):
        """Empty the footer text."""
        self.footer = urwid.GridFlow([], 1, h_sep=2, v_sep=0, align="left")


class ObserverDemoMainView(ObserverDemoAbstractView, Observer):
    """The application' main view (observers on the left, log on the right)."""

    footer_text = [
        [("key", "ENTER/SPACE"), ": Attach/Detach"],
        [("key", "R"), ": Run business logic"],
        [("key", "N"), ": Notify"],
    ]

    def __init__(
        self,
        subject: Subject,
        app_object: typing.Union[ObserverDemoApplication, None],
        observers: typing.Dict[str, Observer],
    ):
        """
        :param subject: The subject currently being used
        :param app_object: The application object
        :param observers: The observers the user may attach or detach (they are
                          initially attached)
        """
        super().__init__(subject, app_object)
        self.observers = observers
        # One checkbox per observer
        self.checkboxes = dict()
        for label, observer in observers.items():
            self.checkboxes[label] = urwid.CheckBox(
                label,
                state=True,
                on_state_change=self._checkbox_changed,
                user_data=observer,
            )
            self.subject.attach(observer)
        # The log messages
        self.log_walker = urwid.SimpleListWalker([])
        # Create the appropriate layout (observers on the left, log on the right)
        self.main_columns = urwid.Columns(
            [
                (
                    8 + max([len(label) for label in observers] or [0]),
                    urwid.LineBox(
                        urwid.ListBox(
                            urwid.SimpleFocusListWalker(
                                [
                                    urwid.AttrMap(cb, "checkbox", "checkbox_f")
                                    for cb in self.checkboxes.values()
                                ]
                            )
                        ),
                        title="Observers",
                    ),
                ),
                urwid.LineBox(urwid.ListBox(self.log_walker), title="Log"),
            ],
            dividechars=1,
        )
        self.main_content = KeyCaptureWrapper(self.main_columns, current_view=self)
        # Start monitoring the subject's state
        self.subject.attach(self)

    def on_update(self, subject: StateReader):
        """Refresh the displayed state."""
        logger.debug("State change notified: %d", subject.state)
        self.header_update()

    def _checkbox_changed(self, checkbox: urwid.CheckBox, state: bool, observer):
        """Attach or detach an observer."""
        logger.debug("User toggled %r (now %s)", observer, state)
        if state:
            self.subject.attach(observer)
        else:
            self.subject.detach(observer)

    def keypress_hook(self, key: str) -> typing.Union[str, None]:
        """Handle key strokes."""
        if key in ("r", "R"):
            self.subject.run_business_logic()
        elif key in ("n", "N"):
            self.subject.notify()
        else:
            return key


class ObserverDemoApplication(object):
    """The object representing the observerdemo UI."""

    def __init__(self, subject: Subject, observers: typing.Dict[str, Observer]):
        """
        :param subject: The subject being demonstrated
        :param observers: The observers the user may play with
        """
        self.subject = subject
        # Create the Frame widget that will be used in the whole application
        self.view = urwid.Frame(urwid.Filler(urwid.Text("Initialising...")))
        # Create the main loop
        screen = (
            urwid.display.curses.Screen()
            if observerdemo_conf.urwid_backend == "curses"
            else urwid.display.raw.Screen()
        )
        logger.debug("Creating the urwid main loop. Screen is: %s", screen)
        if observerdemo_conf.urwid_backend != "curses":
            t_properties = observerdemo_conf.terminal_properties
            screen.set_terminal_properties(**t_properties)
            logger.debug(
                "Creating the urwid main loop. Terminal properties: %s", t_properties
            )
        palette = observerdemo_conf.palette
        self.loop = urwid.MainLoop(
            self.view,
            palette,
            screen=screen,
            unhandled_input=self.unhandled_input,
            handle_mouse=observerdemo_conf.handle_mouse,
        )
        # Create the Main view and display it
        self.current_view = None
        self.main_view = ObserverDemoMainView(self.subject, self, observers)
        self.switch_view(self.main_view)
        # Create the Quit view (just in case)
        self.quit_view = ObserverDemoQuitView(self.subject, self)

    def switch_view(self, view_obj: ObserverDemoAbstractView):
        """Display the **view_obj** view."""
        logger.debug('Switching to view: "%s"', view_obj)
        if self.current_view is not None:
            self.current_view.switch_out_hook()
        view_obj.switch_in_hook()
        self.view.body = view_obj.main_content
        self.view.header = urwid.AttrMap(view_obj.header, "head")
        self.view.footer = urwid.AttrMap(view_obj.footer, "foot")
        self.current_view = view_obj

    def main(self):
        """Run the Urwid main loop (log records are displayed in the main view)."""
        handler = UrwidListHandler(self.main_view.log_walker)
        m_logger = logging.getLogger()
        m_logger.addHandler(handler)
        try:
            self.loop.run()
        finally:
            m_logger.removeHandler(handler)

    def unhandled_input(self, key: str):
        """Handle q/Q key strokes."""
        if key in ("q", "Q") and self.current_view != self.quit_view:
            self.switch_view(self.quit_view)
