"""
Fiscal document engine for Argentine small-business invoicing.

Pure calculation core: line-item VAT pricing, tax applicability, legal
voucher-type determination and the tax authority's QR code payload.
Persistence, HTTP and printing are left to the host application.
"""

__version__ = "0.1.0"
