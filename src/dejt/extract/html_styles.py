"""Extração dos blocos <style> de cadernos convertidos para HTML."""

from bs4 import BeautifulSoup


def find_html_styles(html: str) -> list[str]:
    """Retorna o conteúdo de cada nó <style>, na ordem do documento."""
    soup = BeautifulSoup(html, "html.parser")
    return [style.get_text() for style in soup.find_all("style")]
