"""BizTime: companies, invoices and industries REST API."""

__version__ = "1.0.0"
