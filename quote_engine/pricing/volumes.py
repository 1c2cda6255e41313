"""
Volume Deriver — site/document/page assumptions → document and page counts.
Does not clamp invalid mixes; see validation.validate_inputs.
"""

from __future__ import annotations

from quote_engine.models.inputs import DocumentTypeValues, VolumeAssumptions
from quote_engine.models.schemas import VolumeResult


def derive_volumes(volume: VolumeAssumptions) -> VolumeResult:
    avg_docs = (volume.min_docs_per_site + volume.max_docs_per_site) / 2
    pages_per_doc = sum(
        share * volume.pages_per_document.get(doc_type)
        for doc_type, share in volume.document_mix.items()
    )
    total_docs = volume.n_sites * avg_docs
    total_pages = total_docs * pages_per_doc

    by_type = DocumentTypeValues(
        **{doc_type.value: total_docs * share for doc_type, share in volume.document_mix.items()}
    )

    return VolumeResult(
        n_sites=volume.n_sites,
        avg_docs_per_site=avg_docs,
        pages_per_document=pages_per_doc,
        total_documents=total_docs,
        total_pages=total_pages,
        documents_by_type=by_type,
    )
