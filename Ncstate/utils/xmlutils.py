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
"""
Convert XML documents into plain dicts.

The API responses of the Dining and OUC services can be delivered as XML.
This module flattens such documents into the same kind of structure as their
JSON counterparts:

>>> xml_to_dict('<menu v="2"><item>Soup</item></menu>')
{'menu': {'@attributes': {'v': '2'}, 'item': 'Soup'}}

Rules:

- An element without attributes or children becomes its (stripped) text.
- Other elements become dicts.  Attributes are collected under
  ``'@attributes'`` and each child is stored under its tag.  Repeated tags
  are collected in a list.
- Text is only kept for elements without children.  If such an element also
  has attributes, the text is stored under ``'#text'``.
- Nodes nested deeper than MAX_DEPTH levels are replaced by None.
- The result is a dict with the name of the root element as its only key.
"""
import logging
import xml.etree.ElementTree as ElementTree

logger = logging.getLogger(__name__)

MAX_DEPTH = 25

ATTRIBUTES_KEY = '@attributes'
TEXT_KEY = '#text'


def _local_name(tag):
    """ Strip any {namespace} prefix from a tag. """
    if tag.startswith('{'):
        return tag.split('}', 1)[1]
    return tag


def _flatten(element, depth):
    if depth > MAX_DEPTH:
        logger.debug('xml nesting exceeds %d levels, skipping <%s>',
                     MAX_DEPTH, element.tag)
        return None

    children = list(element)
    text = (element.text or '').strip()

    if not children and not element.attrib:
        return text

    result = {}
    if element.attrib:
        result[ATTRIBUTES_KEY] = {
            _local_name(k): v.strip() for k, v in element.attrib.items()}
    if not children:
        if text:
            result[TEXT_KEY] = text
        return result

    repeated = set()
    for child in children:
        key = _local_name(child.tag)
        value = _flatten(child, depth + 1)
        if key not in result:
            result[key] = value
        elif key in repeated:
            result[key].append(value)
        else:
            result[key] = [result[key], value]
            repeated.add(key)
    return result


def parse(data):
    """
    Parse an XML document.

    :param data: xml document (str or bytes)

    :return: root Element, or None if the document could not be parsed.
    """
    try:
        return ElementTree.fromstring(data)
    except ElementTree.ParseError as e:
        logger.debug('unable to parse xml: %s', e)
        return None


def xml_to_dict(data):
    """
    Flatten an XML document or element into a dict.

    :param data:
        An ElementTree Element, or an XML document as str/bytes.

    :return dict:
        A dict with the root element name as key, or None if *data* is not
        an element and cannot be parsed as XML.
    """
    if isinstance(data, (str, bytes)):
        data = parse(data)
    if data is None or not ElementTree.iselement(data):
        return None
    return {_local_name(data.tag): _flatten(data, 0)}
