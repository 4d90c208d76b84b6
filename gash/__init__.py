# SPDX-PackageSummary: gash - A message digest calculator
# SPDX-FileCopyrightText: Copyright (C) 2014-2025 Gary Hammock
# SPDX-License-Identifier: MPL-2.0

__version__ = "1.0.0"
