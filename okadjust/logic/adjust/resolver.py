#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: okadjust/logic/adjust/resolver.py

import argparse

from okadjust.core.adjuster import AdjustRequest
from okadjust.core.models import ColorModel


def resolve_adjust_request(args: argparse.Namespace, model: ColorModel) -> AdjustRequest:
    """Build the per-run adjustment from parsed arguments.

    Long component names ('lightness') resolve to their short key ('l').
    """
    comp = model.component(args.component)
    return AdjustRequest(
        model=model,
        component=comp.key,
        operation=args.operation,
        value=args.value,
        clamp=not args.no_clamp,
    )
