"""
Visualización de paletas de colores dominantes.

Muestra los colores extraídos por DominantColorExtractor como una barra de
muestras, con el ancho de cada color proporcional a su frecuencia.
"""

from typing import Tuple

import matplotlib.pyplot as plt
import numpy as np

from ..colors.dominant import DominantColorResult


def plot_palette(
    result: DominantColorResult,
    figsize: Tuple[int, int] = (8, 2),
    title: str = 'Colores dominantes'
) -> plt.Figure:
    """
    Dibuja la paleta de colores dominantes como una barra horizontal.

    Cada segmento usa el centro del cluster como color y su ancho es la
    fracción de píxeles del cluster. Si se usó el color de respaldo, se
    dibuja un único segmento que ocupa toda la barra.

    Args:
        result: Resultado de DominantColorExtractor.extract().
        figsize: Tamaño de la figura (ancho, alto) en pulgadas.
        title: Título de la figura.

    Returns:
        fig: Figura de matplotlib con la paleta.

    Raises:
        ValueError: Si el resultado no contiene colores.

    Example:
        >>> result = DominantColorExtractor().extract(PixelArraySource(image))
        >>> fig = plot_palette(result)
        >>> plt.show()
    """
    if not result.centers:
        raise ValueError("El resultado no contiene colores para dibujar")

    # Con el color de respaldo no hay frecuencias: un solo segmento completo
    if result.fallback_used or not result.counts:
        widths = np.ones(len(result.centers)) / len(result.centers)
    else:
        widths = result.fractions()

    # Asegurar que los colores están en [0, 1] para matplotlib
    rgb = np.clip([center.as_tuple() for center in result.centers], 0, 1)

    fig, ax = plt.subplots(figsize=figsize)

    left = 0.0
    for color, width in zip(rgb, widths):
        ax.barh(0, width, left=left, color=color, edgecolor='black', linewidth=0.5)
        if not result.fallback_used:
            # Porcentaje sobre cada segmento, en blanco o negro según luminancia
            luminance = 0.299 * color[0] + 0.587 * color[1] + 0.114 * color[2]
            ax.text(
                left + width / 2, 0, f'{width * 100:.1f}%',
                ha='center', va='center', fontsize=9,
                color='black' if luminance > 0.5 else 'white'
            )
        left += width

    ax.set_xlim(0, 1)
    ax.axis('off')
    ax.set_title(title + (' (respaldo)' if result.fallback_used else ''), fontsize=12, pad=10)

    plt.tight_layout()

    return fig
