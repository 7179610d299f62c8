# encoding: utf-8
""" Tests for Ncstate.brand.bar """
import pytest

from Ncstate.brand import bar


def test_default_iframe_url():
    assert bar.BrandBar().get_iframe_url() == (
        bar.IFRAME_URL + '?color=red&inurl=&center=yes')


@pytest.mark.parametrize('site_url', [
    'http://www.example.ncsu.edu',
    'https://www.example.ncsu.edu',
    'HTTPS://www.example.ncsu.edu',
    'www.example.ncsu.edu',
])
def test_site_url_strips_scheme(site_url):
    brand_bar = bar.BrandBar(site_url=site_url)
    assert brand_bar.site_url == 'www.example.ncsu.edu'
    assert 'inurl=www.example.ncsu.edu&' in brand_bar.get_iframe_url()


def test_site_url_is_quoted():
    brand_bar = bar.BrandBar(site_url='http://www.ncsu.edu/a b/')
    assert 'inurl=www.ncsu.edu%2Fa+b%2F&' in brand_bar.get_iframe_url()


def test_not_centered():
    brand_bar = bar.BrandBar(centered=False)
    assert brand_bar.get_iframe_url().endswith('&center=no')


@pytest.mark.parametrize('value, expected', [
    ('black', 'black'),
    ('red_on_white', 'red_on_white'),
    ('black_on_white', 'black_on_white'),
    ('purple', 'red'),
])
def test_color(value, expected):
    assert bar.BrandBar(color=value).color == expected


def test_legacy_option_names():
    brand_bar = bar.BrandBar(siteUrl='http://foo.ncsu.edu', iframeId='bar')
    assert brand_bar.options['site_url'] == 'http://foo.ncsu.edu'
    assert brand_bar.options['iframe_id'] == 'bar'


def test_unknown_options_ignored():
    brand_bar = bar.BrandBar(foo='bar')
    assert 'foo' not in brand_bar.options


def test_set_options_chains():
    brand_bar = bar.BrandBar()
    assert brand_bar.set_options(color='black') is brand_bar
    assert brand_bar.color == 'black'


def test_stylesheet_html():
    html = bar.BrandBar().get_stylesheet_html()
    assert html.startswith('<link rel="stylesheet"')
    assert 'href="{}"'.format(bar.STYLESHEET_URL) in html


def test_iframe_html():
    html = bar.BrandBar(site_url='www.ncsu.edu').get_iframe_html()
    assert 'id="ncsu_branding_bar"' in html
    assert 'color=red&amp;inurl=www.ncsu.edu&amp;center=yes' in html
    assert bar.NO_IFRAME_PROMPT in html
    assert html.endswith('</iframe>')


def test_bar_html():
    brand_bar = bar.BrandBar()
    assert brand_bar.get_bar_html() == '\n{}\n{}\n'.format(
        brand_bar.get_stylesheet_html(),
        brand_bar.get_iframe_html())
