"""
TableMapper - Mapper para exibicao tabular.

Repassa as linhas cruas e infere as colunas a partir dos eixos declarados,
ou das chaves das linhas quando nenhum eixo Y e declarado.
"""

import re
from typing import Dict, List

from src.chart_pipeline.models.props import TableColumn, TableProps
from src.chart_pipeline.models.schema import ChartDTO
from src.chart_pipeline.mappers.base import BaseChartMapper
from src.chart_pipeline.utils.number_format import format_cell
from src.chart_pipeline.views.view_resolver import ResolvedView


def humanize_header(key: str) -> str:
    """
    Converte uma chave em cabecalho legivel.

    Exemplo:
        >>> humanize_header("total_value-usd")
        'Total Value Usd'
    """
    spaced = re.sub(r"[_-]", " ", key)
    return re.sub(r"\b\w", lambda match: match.group().upper(), spaced)


class TableMapper(BaseChartMapper):
    """
    Mapper para table.

    Nao exige eixo Y. Colunas:
    1. Coluna do eixo X (cabecalho: label ou "Category")
    2. Colunas dos eixos Y declarados (cabecalho: label ou "Value")
    3. Sem eixos Y: uniao das chaves das linhas, na ordem de primeira
       aparicao, sem a coluna X
    """

    def validate(self, dto: ChartDTO) -> None:
        self.logger.debug(f"Tabela sem requisitos de eixo ({len(dto.data)} linhas)")

    def map(self, dto: ChartDTO, resolved: ResolvedView) -> TableProps:
        self.validate(dto)

        config = dto.config
        x_column = config.x_axis.data_column

        columns = [TableColumn(key=x_column, header=config.x_axis.label or "Category")]

        y_columns = [
            TableColumn(key=axis.data_column, header=axis.label or "Value", unit=axis.unit)
            for axis in config.declared_y_axes
        ]

        if not y_columns:
            keys: Dict[str, None] = {}
            for row in dto.data:
                keys.update(dict.fromkeys(row))
            y_columns = [
                TableColumn(key=key, header=humanize_header(key))
                for key in keys
                if key != x_column
            ]

        columns.extend(y_columns)

        self.logger.info(
            f"Tabela mapeada: {len(dto.data)} linhas, {len(columns)} colunas"
        )

        return TableProps(
            title=config.title,
            rows=list(dto.data),
            columns=columns,
            description=config.description,
        )


def format_table_rows(props: TableProps) -> List[List[str]]:
    """Formata as celulas de cada linha conforme a unidade de cada coluna."""
    return [
        [format_cell(row.get(column.key), column.unit) for column in props.columns]
        for row in props.rows
    ]
