"""
The tinycss parser, taught custom properties.
"""
import tinycss
from tinycss.token_data import Token


def merge_custom_name(tokens: list) -> list:
    """
    The CSS 2.1 tokenizer splits `--gap` into a `-` DELIM and a `-gap` IDENT.
    This joins them back into a single IDENT.
    """
    match tokens:
        case [Token(type="DELIM", value="-") as dash, Token(type="IDENT") as ident, *rest]:
            name = dash.value + ident.value
            return [Token("IDENT", name, name, None, dash.line, dash.column), *rest]
    return tokens


class CustomCSSParser(tinycss.CSS21Parser):
    def parse_declaration(self, tokens):
        return super().parse_declaration(merge_custom_name(tokens))

    def parse_media(self, tokens, *args):
        # kept as tokens, MediaQuery.parse_media_query does the rest
        return tokens


Parser = CustomCSSParser()
