from __future__ import annotations

STYLE_BG = "bg-slate-50 text-slate-900 min-h-screen"
STYLE_CONTAINER = "w-full max-w-2xl mx-auto px-6 py-6 gap-6"

STYLE_CARD = "bg-white border border-slate-200 shadow-sm rounded-xl"

STYLE_PAGE_TITLE = "text-2xl font-bold tracking-tight text-slate-900"
STYLE_TEXT_SUBTLE = "text-sm text-slate-500"
STYLE_COUNT = "text-sm font-medium text-indigo-600"

STYLE_BTN_PRIMARY = (
    "bg-slate-900 text-white hover:bg-slate-800 active:scale-[0.99] rounded-lg px-4 py-2 text-sm "
    "font-semibold transition-all focus-visible:outline-none focus-visible:ring-2 focus-visible:ring-amber-400/40"
)
STYLE_BTN_GHOST = (
    "text-slate-600 hover:text-slate-900 hover:bg-slate-100 active:scale-[0.99] rounded-md px-3 py-2 text-sm "
    "font-semibold transition-all focus-visible:outline-none focus-visible:ring-2 focus-visible:ring-slate-400/30"
)

STYLE_INPUT = "w-full text-sm"

STYLE_TODO_ROW = "w-full items-center justify-between border-b border-slate-100 py-2 gap-3"
STYLE_TODO_OPEN = "flex-1 text-base text-slate-700"
STYLE_TODO_DONE = "flex-1 text-base text-slate-400 line-through"

C_BG = STYLE_BG
C_CONTAINER = STYLE_CONTAINER
C_CARD = STYLE_CARD
C_PAGE_TITLE = STYLE_PAGE_TITLE
C_TEXT_SUBTLE = STYLE_TEXT_SUBTLE
C_COUNT = STYLE_COUNT
C_BTN_PRIM = STYLE_BTN_PRIMARY
C_BTN_GHOST = STYLE_BTN_GHOST
C_INPUT = STYLE_INPUT
C_TODO_ROW = STYLE_TODO_ROW
C_TODO_OPEN = STYLE_TODO_OPEN
C_TODO_DONE = STYLE_TODO_DONE
