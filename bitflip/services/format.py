import json


class Format:
    def __init__(self, variants=None):
        self.variants = variants if variants is not None else []

    def json(self, indent=2, sort_keys=True):
        return json.dumps(self.variants, indent=indent, sort_keys=sort_keys, ensure_ascii=False)

    def csv(self):
        """
        Converts the variant data to a CSV string.
        """
        cols = ['mode', 'value']

        # Dynamically add other keys (columns) found in the variant data
        for variant in self.variants:
            for k in variant.keys() - cols:
                cols.append(k)

        # Sort the columns alphabetically after the 'value' column
        cols = cols[:2] + sorted(cols[2:])

        csv = [','.join(cols)]

        for variant in self.variants:
            row = []
            for val in [variant.get(c, '') for c in cols]:
                if isinstance(val, str):
                    if ',' in val or '"' in val or '\n' in val:
                        row.append('"{}"'.format(val.replace('"', '""')))
                    else:
                        row.append(val)
                elif isinstance(val, list):
                    row.append(';'.join(val))  # Join list items with semicolon
                elif isinstance(val, int):
                    row.append(str(val))
                else:
                    row.append('')
            csv.append(','.join(row))

        return '\n'.join(csv)

    def list(self, sep=' '):
        """
        Joins the variant values with `sep`, in the order given.
        """
        return sep.join(str(variant.get('value', '')) for variant in self.variants)
