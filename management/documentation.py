from api.services.document_service import describe_api, describe_ui_config, dump_document
from .endpoints import endpoint


@endpoint("openapi")
def openapi():
    return dump_document(describe_api())


@endpoint("swaggeruiconfig")
def swagger_ui_config():
    return dump_document(describe_ui_config())
