from .directory import DirectoryDeserializer, DirectoryInputs
