from domolect.adapters.storage.json_vocabulary import JsonVocabulary, VocabularyFileError

__all__ = ["JsonVocabulary", "VocabularyFileError"]
