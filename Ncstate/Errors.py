# -*- coding: utf-8 -*-
#
# Copyright 2011-2024 North Carolina State University
#
# This file is part of Ncstate.
#
# Ncstate is free software; you can redistribute it and/or modify it
# under the terms of the GNU General Public License as published by
# the Free Software Foundation; either version 2 of the License, or
# (at your option) any later version.
#
# Ncstate is distributed in the hope that it will be useful, but
# WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the GNU
# General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with Ncstate; if not, write to the Free Software Foundation,
# Inc., 59 Temple Place, Suite 330, Boston, MA 02111-1307, USA.
"""Generic and specific exception classes for Ncstate."""


class DocstringException(Exception):
    """Makes it easy to define more descriptive error messages.

       >>> class RealityError(DocstringException):
       ...     '''Unreachable point'''

       >>> raise RealityError
       Traceback (most recent call last):
         File "<stdin>", line 1, in ?
       RealityError: Unreachable point

       With argument:

       >>> raise RealityError("Outside handler")
       Traceback (most recent call last):
         File "<stdin>", line 1, in ?
       RealityError: Unreachable point: Outside handler

       Without docstring:

       >>> class SomeError(RealityError):
       ...     pass
       >>> raise SomeError
       Traceback (most recent call last):
         File "<stdin>", line 1, in ?
       SomeError
       """

    def __str__(self):
        args = Exception.__str__(self)  # Get our arguments

        # We'll only include the docstring if it has been defined in
        # our direct class. This avoids printing "General Error" when
        # a class SpecificError(GeneralError) just forgot to specify a
        # docstring.
        doc = self.__class__.__doc__
        if args and doc:
            return doc + ': ' + args
        elif args:
            return args
        else:
            return doc or ""


class NcstateError(DocstringException):
    """Generic Ncstate error"""


class BrandError(NcstateError):
    """Brand error"""


class ServiceError(NcstateError):
    """Service error"""

    def __init__(self, message='', code=None):
        super(ServiceError, self).__init__(message)
        self.code = code


class ValidationError(ServiceError):
    """Invalid request"""


class DiningError(ServiceError):
    """Dining Service Error"""
