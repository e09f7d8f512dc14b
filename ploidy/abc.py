# -*- coding: utf-8 -*-


def arr1d_to_html(indices, items, caption):
    # N.B., table captions don't render in jupyter notebooks on GitHub,
    # so put caption outside table element

    html = '<div class="ploidy ploidy-DisplayAs1D">'
    # sanitize caption
    caption = caption.replace('<', '&lt;').replace('>', '&gt;')
    html += '<span>%s</span>' % caption

    # build table
    html += '<table>'
    html += '<tr>'
    for i in indices:
        html += '<th style="text-align: center">%s</th>' % i
    html += '</tr>'
    html += '<tr>'
    for item in items:
        html += '<td style="text-align: center">%s</td>' % item
    html += '</tr>'
    html += '</table>'
    html += '</div>'

    return html


# noinspection PyAbstractClass
class DisplayAs1D(object):
    """Mixin for 1-dimensional containers that can render a truncated
    string or HTML view of their items.

    Subclasses must implement ``__len__``, ``str_items()`` and a ``caption``
    property, and support slicing via ``__getitem__``.

    """

    def __str__(self):
        return self.to_str()

    def __repr__(self):
        return self.caption + '\n' + str(self)

    def _repr_html_(self):
        return self.to_html()

    def get_display_items(self, threshold=10, edgeitems=5):

        # ensure threshold
        if threshold is None:
            threshold = len(self)

        # ensure sensible edgeitems
        edgeitems = min(edgeitems, threshold // 2)

        # determine indices of items to show
        n = len(self)
        if n > threshold:
            indices = (
                list(range(edgeitems)) + [' ... '] +
                list(range(n - edgeitems, n, 1))
            )
            head = self[:edgeitems].str_items()
            tail = self[n - edgeitems:].str_items()
            items = head + [' ... '] + tail
        else:
            indices = list(range(n))
            items = self[:].str_items()

        return indices, items

    def to_str(self, threshold=10, edgeitems=5):
        _, items = self.get_display_items(threshold, edgeitems)
        s = ' '.join(items)
        return s

    def to_html(self, threshold=10, edgeitems=5, caption=None):
        indices, items = self.get_display_items(threshold, edgeitems)
        if caption is None:
            caption = self.caption
        return arr1d_to_html(indices, items, caption)

    def display(self, threshold=10, edgeitems=5, caption=None):
        html = self.to_html(threshold, edgeitems, caption)
        from IPython.display import display_html
        display_html(html, raw=True)

    def displayall(self, caption=None):
        self.display(threshold=None, caption=caption)
