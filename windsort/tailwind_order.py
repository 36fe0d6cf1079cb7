"""
Built-in utility order, pinned to the Tailwind CSS v3.4 property order
(layout -> box model -> flexbox/grid -> spacing -> borders -> backgrounds ->
typography -> effects -> filters -> transitions).

Ambiguous families (``text-``, ``font-``, ``border-``, ``bg-`` ...) are split
with ``re:`` entries, which are tried before the catch-all prefix.
"""
from __future__ import annotations

from typing import Tuple

_SIZES = r'(?:xs|sm|base|lg|xl|[2-9]xl)'
_SIDES = r'(?:x|y|s|e|t|r|b|l)'
_CORNERS = r'(?:s|e|t|r|b|l|ss|se|ee|es|tl|tr|br|bl)'

DEFAULT_SORT_ORDER: Tuple[str, ...] = (
    # components
    'container',
    # accessibility / interactivity
    'sr-only',
    'not-sr-only',
    'pointer-events-*',
    'visible',
    'invisible',
    'collapse',
    # position
    'static',
    'fixed',
    'absolute',
    'relative',
    'sticky',
    'inset-*',
    'inset-x-*',
    'inset-y-*',
    'start-*',
    'end-*',
    'top-*',
    'right-*',
    'bottom-*',
    'left-*',
    'isolate',
    'isolation-auto',
    'z-*',
    'order-*',
    'col-*',
    'col-start-*',
    'col-end-*',
    'row-*',
    'row-start-*',
    'row-end-*',
    'float-*',
    'clear-*',
    # margin
    'm-*',
    'mx-*',
    'my-*',
    'ms-*',
    'me-*',
    'mt-*',
    'mr-*',
    'mb-*',
    'ml-*',
    'box-border',
    'box-content',
    'line-clamp-*',
    # display
    'block',
    'inline-block',
    'inline',
    'flex',
    'inline-flex',
    'table',
    'inline-table',
    'table-caption',
    'table-cell',
    'table-column',
    'table-column-group',
    'table-footer-group',
    'table-header-group',
    'table-row-group',
    'table-row',
    'flow-root',
    'grid',
    'inline-grid',
    'contents',
    'list-item',
    'hidden',
    # sizing
    'aspect-*',
    'size-*',
    'h-*',
    'max-h-*',
    'min-h-*',
    'w-*',
    'min-w-*',
    'max-w-*',
    # flex item
    'flex-*',
    'shrink',
    'shrink-*',
    'grow',
    'grow-*',
    'basis-*',
    'table-auto',
    'table-fixed',
    'caption-*',
    'border-collapse',
    'border-separate',
    'border-spacing-*',
    'origin-*',
    # transforms
    'translate-x-*',
    'translate-y-*',
    'rotate-*',
    'skew-x-*',
    'skew-y-*',
    'scale-*',
    'scale-x-*',
    'scale-y-*',
    'transform',
    'transform-cpu',
    'transform-gpu',
    'transform-none',
    'animate-*',
    'cursor-*',
    'touch-*',
    'select-*',
    'resize',
    'resize-*',
    'snap-*',
    'scroll-m*',
    'scroll-p*',
    'list-inside',
    'list-outside',
    'list-*',
    'appearance-*',
    'columns-*',
    'break-before-*',
    'break-inside-*',
    'break-after-*',
    # grid / flex container
    'auto-cols-*',
    'grid-flow-*',
    'auto-rows-*',
    'grid-cols-*',
    'grid-rows-*',
    'flex-row',
    'flex-row-reverse',
    'flex-col',
    'flex-col-reverse',
    'flex-wrap',
    'flex-wrap-reverse',
    'flex-nowrap',
    'place-content-*',
    'place-items-*',
    'content-*',
    'items-*',
    'justify-*',
    'justify-items-*',
    'gap-*',
    'gap-x-*',
    'gap-y-*',
    'space-x-*',
    'space-y-*',
    r're:divide-[xy](?:-\d+|-\[[^\]]+\])?',
    'divide-x-reverse',
    'divide-y-reverse',
    'divide-solid',
    'divide-dashed',
    'divide-dotted',
    'divide-double',
    'divide-none',
    'divide-*',
    'place-self-*',
    'self-*',
    'justify-self-*',
    'overflow-*',
    'overflow-x-*',
    'overflow-y-*',
    'overscroll-*',
    'scroll-auto',
    'scroll-smooth',
    'truncate',
    'text-ellipsis',
    'text-clip',
    'hyphens-*',
    'whitespace-*',
    'text-wrap',
    'text-nowrap',
    'text-balance',
    'text-pretty',
    'break-normal',
    'break-words',
    'break-all',
    'break-keep',
    # borders
    'rounded',
    rf're:rounded-{_CORNERS}(?:-.+)?',
    'rounded-*',
    'border',
    r're:border-(?:\d+|\[\d[^\]]*px\])',
    rf're:border-{_SIDES}(?:-\d+)?',
    'border-solid',
    'border-dashed',
    'border-dotted',
    'border-double',
    'border-hidden',
    'border-none',
    'border-opacity-*',
    'border-*',
    # backgrounds
    'bg-fixed',
    'bg-local',
    'bg-scroll',
    'bg-clip-*',
    'bg-opacity-*',
    'bg-origin-*',
    'bg-none',
    'bg-gradient-*',
    r're:bg-(?:auto|cover|contain)',
    r're:bg-(?:bottom|center|left|left-bottom|left-top|right|right-bottom|right-top|top)',
    r're:bg-(?:repeat|no-repeat|repeat-x|repeat-y|repeat-round|repeat-space)',
    'bg-blend-*',
    'bg-*',
    'from-*',
    'via-*',
    'to-*',
    'box-decoration-*',
    r're:stroke-\d+',
    'fill-*',
    'stroke-*',
    'object-*',
    # padding
    'p-*',
    'px-*',
    'py-*',
    'ps-*',
    'pe-*',
    'pt-*',
    'pr-*',
    'pb-*',
    'pl-*',
    # typography
    'text-left',
    'text-center',
    'text-right',
    'text-justify',
    'text-start',
    'text-end',
    'indent-*',
    'align-*',
    'font-sans',
    'font-serif',
    'font-mono',
    rf're:text-{_SIZES}(?:/.+)?',
    r're:text-\[\d[^\]]*(?:px|rem|em)\]',
    r're:font-(?:thin|extralight|light|normal|medium|semibold|bold|extrabold|black|\d+)',
    'uppercase',
    'lowercase',
    'capitalize',
    'normal-case',
    'italic',
    'not-italic',
    'normal-nums',
    'ordinal',
    'slashed-zero',
    'lining-nums',
    'oldstyle-nums',
    'proportional-nums',
    'tabular-nums',
    'diagonal-fractions',
    'stacked-fractions',
    'leading-*',
    'tracking-*',
    'font-*',
    'text-opacity-*',
    'text-*',
    'underline',
    'overline',
    'line-through',
    'no-underline',
    r're:decoration-(?:solid|double|dotted|dashed|wavy)',
    r're:decoration-(?:auto|from-font|\d+)',
    'decoration-*',
    'underline-offset-*',
    'antialiased',
    'subpixel-antialiased',
    'placeholder-*',
    'caret-*',
    'accent-*',
    # effects
    'opacity-*',
    'mix-blend-*',
    'shadow',
    'shadow-*',
    'outline-none',
    'outline',
    'outline-offset-*',
    'outline-*',
    'ring',
    'ring-inset',
    'ring-offset-*',
    'ring-*',
    # filters
    'blur',
    'blur-*',
    'brightness-*',
    'contrast-*',
    'drop-shadow',
    'drop-shadow-*',
    'grayscale',
    'grayscale-*',
    'hue-rotate-*',
    'invert',
    'invert-*',
    'saturate-*',
    'sepia',
    'sepia-*',
    'filter',
    'filter-none',
    'backdrop-*',
    # transitions / animation
    'transition',
    'transition-*',
    'delay-*',
    'duration-*',
    'ease-*',
    'will-change-*',
    'content-none',
)
