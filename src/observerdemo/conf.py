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
Handle the observerdemo configuration's file.
"""

from __future__ import annotations

import configparser
import logging
import logging.handlers
import math
import os
import sys
import typing

__all__ = ["ObserverDemoConfig", "observerdemo_conf"]

logger = logging.getLogger(__name__)


#: The default urwid palette for the observerdemo text UI
DEFAULT_PALETTE = dict(
    log=("light gray", "black"),
    head=("yellow", "black", "standout"),
    foot=("white", "black"),
    key=("light cyan", "black", "underline"),
    button=("black", "light gray"),
    button_f=("white", "dark blue", "bold"),
    checkbox=("black", "light gray"),
    checkbox_f=("white", "dark blue", "bold"),
)


class ObserverDemoConfig(object):
    """Read the observerdemo configuration files.

    A system-wide configuration file can be specified using the
    OBSERVERDEMO_SITE_CONF environment variable. An additional user-wide
    configuration file while be read in (if present). It is located in
    ~/.observerdemorc.ini.
    """

    _CONFIG_ENV_VAR = "OBSERVERDEMO_SITE_CONF"
    _CONFIG_FILE = os.path.join(os.path.expanduser("~"), ".observerdemorc.ini")

    def __init__(self, conf_txt: str = None):
        """
        :param conf_txt: Provide a text based version of the config file. For
                         testing purposes only. If provided, the default
                         configuration (~/.observerdemorc.ini) is not read in.
        """
        conf_obj = configparser.ConfigParser()
        conf_obj.optionxform = lambda option: option
        if conf_txt is not None:
            conf_obj.read_string(conf_txt)
        else:
            todo = []
            site_config = os.environ.get(self._CONFIG_ENV_VAR, None)
            if site_config and os.path.exists(site_config):
                todo.append(site_config)
            if os.path.exists(self._CONFIG_FILE):
                todo.append(self._CONFIG_FILE)
            if todo:
                conf_obj.read(todo, encoding="utf-8")
        self._conf = conf_obj

    def logging_config(
        self, filename: str = None, level: str = None, console: bool = True
    ):
        """Configure the logging facility.

        The ``filename`` and ``level`` options of the configuration file
        ``[logging]`` section are considered. By default, messages of level
        ``INFO`` and above are printed on the standard output and no log file
        is written.

        :param console: Print log messages on the standard output
        """
        m_logger = logging.getLogger()
        if console:
            c_handler = logging.StreamHandler(sys.stdout)
            c_handler.setFormatter(logging.Formatter("%(message)s"))
            m_logger.addHandler(c_handler)
        if filename is None:
            filename = self._conf.get("logging", "filename", fallback=None)
        if filename:
            f_handler = logging.handlers.TimedRotatingFileHandler(
                os.path.expanduser(filename),
                when="midnight",
                interval=1,
                backupCount=3,
                encoding="utf-8",
            )
            f_handler.setFormatter(
                logging.Formatter(
                    "[%(asctime)s] pid=%(process)d: %(name)s %(levelname)s: %(message)s"
                )
            )
            m_logger.addHandler(f_handler)
        # Configure the logging level
        if level is None:
            m_logger.setLevel(self._conf.get("logging", "level", fallback="INFO"))
        else:
            m_logger.setLevel(level)

    @property
    def processing_delay(self) -> float:
        """How long the subject pretends to work on each state change (in seconds).

        Example::

            [subject]
            processing_delay = 0.5

        """
        value = float(self._conf.get("subject", "processing_delay", fallback="0.015"))
        if not math.isfinite(value) or value < 0:
            raise ValueError("processing_delay must be a finite number >= 0. Not {!s}.".format(value))
        return value

    @property
    def state_range(self) -> typing.Tuple[int, int]:
        """The bounds (min included, max excluded) of the subject's state."""
        s_min = int(self._conf.get("subject", "state_min", fallback="0"))
        s_max = int(self._conf.get("subject", "state_max", fallback="10"))
        if s_min >= s_max:
            raise ValueError(
                "state_min must be < state_max. Got {:d} and {:d}.".format(s_min, s_max)
            )
        return s_min, s_max

    @property
    def seed(self) -> typing.Union[int, None]:
        """The random generator seed (``None`` means "not reproducible")."""
        value = self._conf.get("subject", "seed", fallback="None")
        if value.strip(" ") in ("None", "none", "Null", "null", ""):
            return None
        return int(value)

    @property
    def urwid_backend(self) -> str:
        """The 'urwid' that should be used to create tha layout.

        Currently, only ``raw`` and ``curses`` are supported.

        Example::

            [urwid]
            backend = raw

        """
        return self._conf.get("urwid", "backend", fallback="raw")

    @property
    def palette(self) -> typing.List[typing.Tuple]:
        """Return a "palette" description that could be used in urwid.

        The palette configuration data are to be found in the [palette] section
        of the configuration file.

        The configuration file key corresponds to the palette entry key. The
        configuration value is split based on the ',' and '+' character in
        order to create the appropriate tuples.

        For example::

            log = black, dark magenta, bold+underline

        Will be transformed into the following tuple::

            ('log', 'black', 'dark magenta', ('bold', 'underline')),

        The resulting palette is an update of the default palette (see the
        ``DEFAULT_PALETTE`` module variable) with lines read in the
        configuration file.
        """
        full_palette = DEFAULT_PALETTE.copy()
        if self._conf.has_section("palette"):
            palette = dict()
            for k, v in self._conf.items("palette"):
                v_items = [s.strip(" ") for s in v.split(",")]
                v_items = [tuple(s.split("+")) if "+" in s else s for s in v_items]
                palette[k] = tuple(v_items)
            # noinspection PyTypeChecker
            full_palette.update(palette)
        return [(k, *v) for k, v in sorted(full_palette.items())]

    @staticmethod
    def _true_false_none_value(value: str) -> typing.Union[bool, None]:
        """Detect True, False or None in a configuration entry."""
        if value.strip(" ") in ("false", "False", "0"):
            return False
        elif value.strip(" ") in ("True", "true", "1"):
            return True
        elif value.strip(" ") in ("None", "none", "Null", "null"):
            return None
        else:
            raise ValueError("Must be True, False or None. Not {!s}.".format(value))

    @property
    def terminal_properties(self) -> dict:
        """Read the necessary data to setup the Urwid screen object.

        A ``None`` value, means do not change the default.
        """
        return dict(
            colors=int(self._conf.get("urwid", "terminal_colors", fallback=0)) or None,
            bright_is_bold=self._true_false_none_value(
                self._conf.get("urwid", "terminal_bright_is_bold", fallback="None")
            ),
            has_underline=self._true_false_none_value(
                self._conf.get("urwid", "terminal_has_underline", fallback="None")
            ),
        )

    @property
    def handle_mouse(self) -> bool:
        """Allow mouse interactions."""
        return self._true_false_none_value(
            self._conf.get("urwid", "handle_mouse", fallback="False")
        )


#: The go-to object to fetch some configuration data
observerdemo_conf = ObserverDemoConfig()
