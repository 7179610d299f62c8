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
Common quicklinks found in most NC State templates.
"""
import collections
import html

LINKS = collections.OrderedDict((
    ('Academic Calendar', 'http://www.ncsu.edu/registrar/calendars/'),
    ('Bookstore', 'http://www.fis.ncsu.edu/ncsubookstores/'),
    ('Campus Administration',
     'http://www.ncsu.edu/about-nc-state/university-administration/'),
    ("Cashier's Office", 'http://www.fis.ncsu.edu/cashier/'),
    ('Centennial Campus',
     'http://www.ncsu.edu/about-nc-state/centennial-campus/'),
    ('Colleges & Academic Departments',
     'http://www.ncsu.edu/academics/index.html'),
    ('Distance Education', 'http://distance.ncsu.edu/'),
    ('Financial Aid & Scholarships', 'http://www7.acs.ncsu.edu/financial_aid/'),
    ('Graduate School', 'http://www2.acs.ncsu.edu/grad/'),
    ('Housing', 'http://www.ncsu.edu/campus-life/housing/'),
    ('Registration & Records', 'http://www.ncsu.edu/registrar/'),
    ('Undergraduate Admissions', 'http://www.fis.ncsu.edu/uga/'),
    ('Vista Courses', 'http://vista.ncsu.edu/'),
    ('Webmail', 'https://webmail.ncsu.edu/'),
    ('Wolfware Courses', 'http://courses.ncsu.edu/'),
))


class Quicklinks(object):
    """ The common quicklinks, as label -> url. """

    def __init__(self, links=LINKS):
        self._links = links

    def get_links(self):
        return collections.OrderedDict(self._links)

    def get_links_html(self, css_class='quicklinks'):
        """ Render the links as an html list. """
        items = ['<li><a href="{}">{}</a></li>'.format(html.escape(url),
                                                       html.escape(label))
                 for label, url in self._links.items()]
        return '<ul class="{}">\n{}\n</ul>'.format(html.escape(css_class),
                                                 '\n'.join(items))
