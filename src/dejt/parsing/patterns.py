"""
Padrões fixos do Diário Eletrônico da Justiça do Trabalho (DEJT).

Os regex abaixo são específicos do layout do caderno judiciário gerado
pelo `pdftotext` (quebras de página como form feed, acentuação em
português). Não tentam generalizar para outros documentos.

Número CNJ (Resolução 65/2008):
    NNNNNNN-DD.AAAA.J.TR.OOOO
    ex: 0010977-62.2021.5.02.0025
"""

# =============================================================================
# NÚMERO DO PROCESSO
# =============================================================================

CNJ_NUMBER = r"[0-9]{7}-[0-9]{2}\.[0-9]{4}\.[0-9]\.[0-9]{2}\.[0-9]{4}"

# Início de cada publicação: "Processo Nº RTOrd-0010977-62.2021.5.02.0025"
LAWSUIT_DELIMITER = rf"Processo.{{1,10}}{CNJ_NUMBER}"

# Introdução do corpo da intimação; o que vem depois não entra no contexto
NOTIFICATION_BODY = r"Intimado\(s\).+"

# Identificador canônico: prefixo de classe opcional (ex: "RTOrd-") + CNJ
LAWSUIT_ID = rf"[^\W\d_]*-?{CNJ_NUMBER}"

# =============================================================================
# BOILERPLATE DO CADERNO
# =============================================================================

# Cabeçalho da primeira página
FIRST_HEADER = (
    r"Caderno Judiciário do Tribunal Regional do Trabalho da [0-9]{1,2}ª Região\n"
    r"DIÁRIO ELE.*\n"
    r"PODER JUD.*\n"
    r"Nº[0-9]{4,5}/[0-9]{4}.*\n"
    r"Tribunal .*[0-9]{1,2}ª Região\n"
)

# Cabeçalho repetido após cada quebra de página
PAGE_HEADER = r"\f[0-9]{3,5}/[0-9]{4}.*\n?Data da Disponibilização.*\n"

# Rodapé com o código de autenticidade; a quebra de linha final fica no texto
FOOTER = r"\nCódigo para aferir autenticidade deste caderno.*(?=\n)"
