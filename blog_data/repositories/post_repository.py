from blog_data.repositories.document_repository import DocumentRepository


class PostRepository(DocumentRepository):
    pass
